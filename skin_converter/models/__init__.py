from .skin_image import SkinImage
from .skin_format import SkinFormat, LimbVariant, SlimSampleCounts
from .results import ConvertedSkin, SkinHead, ReturnType
