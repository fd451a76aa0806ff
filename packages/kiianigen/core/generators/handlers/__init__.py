"""Built-in animation generators."""

from kiianigen.core.generators.handlers.breath import (
    BaseTopBreathGenerator,
    BlueGreenBaseTopBreathDartGenerator,
    BlueGreenBaseTopBreathSpinGenerator,
    BlueGreenBreathGenerator,
    ColorBreatheGenerator,
    MacSleepBreathGenerator,
)
from kiianigen.core.generators.handlers.noise import (
    DodgyPixelGenerator,
    EscapeTestGenerator,
    WhiteNoiseGenerator,
)
from kiianigen.core.generators.handlers.pulse import (
    BlueYellowPulseGenerator,
    ColorPulseGenerator,
    LinearPulseGenerator,
    RedPulseGenerator,
    RgbPulseGenerator,
    RgbZebraPulseGenerator,
)
from kiianigen.core.generators.handlers.regions import (
    TopAndBottom2Generator,
    TopAndBottomGenerator,
)
from kiianigen.core.generators.handlers.scanner import (
    BluewipeGenerator,
    Kitt2000Generator,
)
from kiianigen.core.generators.registry import GeneratorRegistry


def load_builtin_generators() -> GeneratorRegistry:
    """Create a GeneratorRegistry with every built-in generator registered.

    Returns:
        GeneratorRegistry whose name order is the order ``all`` runs them in.
    """
    registry = GeneratorRegistry()

    # Presets
    registry.register(DodgyPixelGenerator())
    registry.register(Kitt2000Generator())
    registry.register(BluewipeGenerator())
    registry.register(MacSleepBreathGenerator())
    registry.register(BlueGreenBreathGenerator())
    registry.register(BlueGreenBaseTopBreathSpinGenerator())
    registry.register(BlueGreenBaseTopBreathDartGenerator())
    registry.register(BaseTopBreathGenerator())
    registry.register(RedPulseGenerator())
    registry.register(LinearPulseGenerator())
    registry.register(BlueYellowPulseGenerator())
    registry.register(RgbPulseGenerator())
    registry.register(RgbZebraPulseGenerator())
    registry.register(WhiteNoiseGenerator())
    registry.register(TopAndBottomGenerator())
    registry.register(TopAndBottom2Generator())
    registry.register(EscapeTestGenerator())

    # Generic building blocks
    registry.register(ColorPulseGenerator())
    registry.register(ColorBreatheGenerator())

    return registry


__all__ = [
    "BaseTopBreathGenerator",
    "BlueGreenBaseTopBreathDartGenerator",
    "BlueGreenBaseTopBreathSpinGenerator",
    "BlueGreenBreathGenerator",
    "BlueYellowPulseGenerator",
    "BluewipeGenerator",
    "ColorBreatheGenerator",
    "ColorPulseGenerator",
    "DodgyPixelGenerator",
    "EscapeTestGenerator",
    "Kitt2000Generator",
    "LinearPulseGenerator",
    "MacSleepBreathGenerator",
    "RedPulseGenerator",
    "RgbPulseGenerator",
    "RgbZebraPulseGenerator",
    "TopAndBottom2Generator",
    "TopAndBottomGenerator",
    "WhiteNoiseGenerator",
    "load_builtin_generators",
]
