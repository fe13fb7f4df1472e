from .inputs import SLIDERS, CalculationInputs, SliderDefinition, get_slider

__all__ = ["SLIDERS", "CalculationInputs", "SliderDefinition", "get_slider"]
