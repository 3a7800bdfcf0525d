from rootanchors.anchors import (
    get_all_from_embedded,
    get_all_from_file,
    get_all_from_reader,
    get_valid_from_embedded,
    get_valid_from_file,
    get_valid_from_reader,
)
from rootanchors.constants import DEFAULT_FORMAT, DS_TTL
from rootanchors.exceptions import DecodeError, RootAnchorsError, ValidationError
