"""
FIFF Channel Metadata

Channel descriptors, coordinate transforms, and the measurement info
model with its MNE toolbox channel selectors.
"""

from .constants import *
from .ch_info import ChannelInfo
from .coord_trans import CoordTrans
from .errors import InvalidSelectionError, MalformedInfoError
from .info_base import MeasInfoBase
from .pick import PickSpec, pick_channels, pick_channels_regexp
