from settings import configure_settings


def pytest_configure(config):
    configure_settings()
