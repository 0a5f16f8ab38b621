from .announce_controller import SAPAnnouncer
from .main import main
__all__ = ["main", "SAPAnnouncer"]
