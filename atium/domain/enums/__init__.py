from atium.domain.enums.analysis import InfoFormat, InfoOutputType
from atium.domain.enums.engines import AnalysisEngine, ConversionEngine, InputSourceType
from atium.domain.enums.resolution import OutputCodec, OutputResolution
__all__ = [
    "InfoFormat",
    "InfoOutputType",
    "AnalysisEngine",
    "ConversionEngine",
    "InputSourceType",
    "OutputCodec",
    "OutputResolution",
]
