"""Command-line entry point: serve the validation API with uvicorn."""

if __name__ == "__main__":
    import uvicorn

    from framework_validation.config import get_settings
    from framework_validation.main import app

    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)
