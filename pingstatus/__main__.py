from pingstatus.logging import configure_logging
from pingstatus.runner import run
from pingstatus.settings import settings


def main() -> None:
    configure_logging(settings.log_level, settings.environment)
    run(settings)


if __name__ == "__main__":
    main()
