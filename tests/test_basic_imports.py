"""
Basic import tests to verify the core functionality.
"""

import logging

from flask import Flask


def test_name_service_imports():
    """Test that name_service modules can be imported."""
    from name_service import NameCatalog, ProgressRepository, MemoryStore, Rating, UserProgress
    from name_service.personalization import HeuristicRanker, PersonalizationGate, build_default_ranker

    assert callable(NameCatalog.load)
    assert isinstance(build_default_ranker(), HeuristicRanker)
    assert PersonalizationGate().min_ratings == 20
    assert Rating("love") is Rating.LOVE
    assert ProgressRepository(MemoryStore()).load("nick") is None
    assert UserProgress().current_index == 0


def test_module_factories_return_blueprints():
    """Each app module factory returns a service and a blueprint."""
    from app.compare.factory import create_compare_module
    from app.user_progress.factory import create_user_progress_module
    from app.personalization.factory import create_personalization_module
    from name_service.personalization import PersonalizationGate
    from name_service import MemoryStore, NameCatalog, ProgressRepository

    user_module = create_user_progress_module(
        repository=ProgressRepository(MemoryStore()),
        catalog=NameCatalog([]),
        partner_ids=["nick", "nicki"],
    )
    compare_module = create_compare_module(progress_service=user_module["service"])

    app = Flask(__name__)
    app.register_blueprint(user_module["blueprint"])
    app.register_blueprint(compare_module["blueprint"])

    personalization_module = create_personalization_module(
        progress_service=user_module["service"],
        catalog=NameCatalog([]),
        gate=PersonalizationGate(),
    )
    assert set(personalization_module) == {"service", "blueprint"}
    app.register_blueprint(personalization_module["blueprint"])

    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert "/api/user" in rules
    assert "/api/compare" in rules
    assert "/api/personalize/profile" in rules


def test_logging_setup_and_stop():
    """Queue-based logging can be started, restarted and stopped."""
    from name_service.logging_config import setup_logging, stop_logging, get_logger

    try:
        setup_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG

        setup_logging(debug=False)
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("werkzeug").level == logging.WARNING

        get_logger("tests").info("logging works")
    finally:
        stop_logging()
