from factboard.models.fact import Fact
from factboard.models.ingestion_run import IngestionRun

__all__ = ['Fact', 'IngestionRun']
