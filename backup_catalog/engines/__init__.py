from typing import Callable, Mapping

from ..meta import GenericMetaInteractor
from .greenplum import *
from .mongo import *
from .sqlserver import *


ENGINE_INTERACTORS: Mapping[str, Callable[[], GenericMetaInteractor]] = {
    'greenplum': GreenplumMetaInteractor,
    'mongo': MongoMetaInteractor,
    'sqlserver': SQLServerMetaInteractor
}
"""Maps from a database engine's command line name to its metadata interactor."""
