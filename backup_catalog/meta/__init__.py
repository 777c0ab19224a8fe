from .interactor import *
from .listing import *
from .model import *
from .sentinel import *
