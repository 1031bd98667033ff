from autocomment.infra.logging.console import ConsoleLogger
from autocomment.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
