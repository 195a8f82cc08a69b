from utils.logging_config import UVICORN_LOGGERS, build_logging_config


def test_root_and_server_loggers_share_the_rich_handler():
    config = build_logging_config("debug", server_level="warning")
    loggers = config["loggers"]

    assert loggers[""]["level"] == "DEBUG"
    for name in UVICORN_LOGGERS:
        assert loggers[name] == {"handlers": ["rich"], "level": "WARNING", "propagate": False}
    assert config["handlers"]["rich"]["class"] == "rich.logging.RichHandler"


def test_each_call_builds_independent_entries():
    config = build_logging_config()
    config["loggers"]["uvicorn"]["level"] = "ERROR"
    assert build_logging_config()["loggers"]["uvicorn"]["level"] == "INFO"
