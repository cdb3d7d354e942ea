from __future__ import annotations
from khmercal.core.config import DEFAULT_CONFIG, CalculatorConfig
from khmercal.core.engine import CalculatorRegistry
from khmercal.engines.calendar import LunisolarCalculator

ALL_CONFIGS = {
    "khmer": DEFAULT_CONFIG,
}

def make_calculator(config: CalculatorConfig, *, name: str = "custom") -> LunisolarCalculator:
    return LunisolarCalculator(config, name=name)

def build_registry() -> CalculatorRegistry:
    calculators = {}
    for name, config in ALL_CONFIGS.items():
        calculators[name] = make_calculator(config, name=name)
    return CalculatorRegistry(calculators)
