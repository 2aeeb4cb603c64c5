from .converter import MinecraftSkinConverter
from .errors import (
    DecodeFailureError,
    DimensionMismatchError,
    InvalidDimensionsError,
    InvalidInputTypeError,
    SizeTooSmallError,
    SkinConverterError,
)
from .models.results import ConvertedSkin, ReturnType, SkinHead
from .models.skin_format import LimbVariant, SkinFormat
from .pipeline.head_extractor import extract_head, get_skin_head
from .pipeline.skin_normalizer import convert_skin, normalize_skin

__version__ = "1.0.0"
