import logging
import random
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix

from config_manager import ConfigManager
from name_service.catalog import NameCatalog
from name_service.personalization import NameRanker, PersonalizationGate
from name_service.store import JsonFileStore, KeyValueStore, ProgressRepository

from app.user_progress.factory import create_user_progress_module
from app.ratings.factory import create_ratings_module
from app.personalization.factory import create_personalization_module
from app.compare.factory import create_compare_module
from app.custom_names.factory import create_custom_names_module
from app.middle_names.factory import create_middle_names_module

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def _resolve(path: str) -> Path:
    """Relative config paths are anchored at the project root."""
    candidate = Path(path)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def create_app(
    config_manager: Optional[ConfigManager] = None,
    store: Optional[KeyValueStore] = None,
    catalog: Optional[NameCatalog] = None,
    ranker: Optional[NameRanker] = None,
    rng: Optional[random.Random] = None,
) -> Flask:
    """Build the Flask application with every module registered.

    Args:
        config_manager: Configuration source; defaults to web_app_config.json + env
        store: Key-value store for progress records; defaults to JSON files
        catalog: Name catalog; defaults to the configured catalog file
        ranker: Ranker used by /api/personalize; defaults to the heuristic ranker
        rng: Random source for shuffling queues
    """
    config_manager = config_manager or ConfigManager()
    app_config = config_manager.get_app_config()
    paths_config = config_manager.get_paths_config()
    personalization_config = config_manager.get_personalization_config()

    app = Flask(__name__)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1, x_prefix=1)

    # -------------------------------------------------------------------------
    # Shared services
    # -------------------------------------------------------------------------

    if catalog is None:
        catalog = NameCatalog.load(_resolve(paths_config.catalog_file))
    if store is None:
        store = JsonFileStore(_resolve(paths_config.user_data_dir))
    repository = ProgressRepository(store)
    gate = PersonalizationGate(personalization_config.min_ratings)

    user_progress_module = create_user_progress_module(
        repository=repository,
        catalog=catalog,
        partner_ids=app_config.partner_ids,
        rng=rng,
    )
    progress_service = user_progress_module["service"]

    ratings_module = create_ratings_module(progress_service=progress_service, gate=gate)
    personalization_module = create_personalization_module(
        progress_service=progress_service,
        catalog=catalog,
        gate=gate,
        ranker=ranker,
    )
    compare_module = create_compare_module(progress_service=progress_service)
    custom_names_module = create_custom_names_module(progress_service=progress_service)
    middle_names_module = create_middle_names_module(progress_service=progress_service, catalog=catalog)

    # -------------------------------------------------------------------------
    # Blueprints
    # -------------------------------------------------------------------------

    app.register_blueprint(user_progress_module["blueprint"])
    app.register_blueprint(ratings_module["blueprint"])
    app.register_blueprint(personalization_module["blueprint"])
    app.register_blueprint(compare_module["blueprint"])
    app.register_blueprint(custom_names_module["blueprint"])
    app.register_blueprint(middle_names_module["blueprint"])

    @app.get("/api/catalog")
    def catalog_names():
        """Full first and middle name catalog for the client."""
        return jsonify({
            "names": [entry.model_dump(mode="json") for entry in catalog.names],
            "middleNames": [entry.model_dump(mode="json") for entry in catalog.middle_names],
        })

    @app.get("/actuator/health")
    def actuator_health():
        """Health check endpoint for monitoring tools and cloud platforms."""
        return jsonify({
            "status": "UP",
            "service": "baby-name-picker"
        }), 200

    logger.info(
        "App ready: %d names, partners=%s, personalize after %d ratings",
        len(catalog), app_config.partner_ids, gate.min_ratings,
    )
    return app
