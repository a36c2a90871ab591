from fleet_lite.infra.db.models.base import Base
from fleet_lite.infra.db.models.truck import TruckRow

__all__ = ["Base", "TruckRow"]
