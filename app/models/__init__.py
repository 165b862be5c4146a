# Scenic Parking — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.space import Space                     # noqa
from app.models.whitelist_entry import WhitelistEntry  # noqa
from app.models.vehicle import ParkedVehicle           # noqa
from app.models.parking_log import ParkingLog          # noqa
