from .backup_list import *
from .backup_mark import *
from .command import *
from .restore_point_list import *
from .user_data import *
