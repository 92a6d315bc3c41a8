from infra.constructs.api import Api
from infra.constructs.database import Database
from infra.constructs.functions import Functions
from infra.constructs.layers import Layers

__all__ = ["Api", "Database", "Functions", "Layers"]
