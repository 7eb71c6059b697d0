"""Service layer exports."""

from .errors import ConfigurationError, FactoryError
from .battle_service import BattleResult, BattleService
from .catalogue import Catalogue
from .simulation_service import SimulationReport, SimulationService

__all__ = [
    "BattleResult",
    "BattleService",
    "Catalogue",
    "ConfigurationError",
    "FactoryError",
    "SimulationReport",
    "SimulationService",
]
