from .availability_calculator import AvailabilityCalculator
from .pricing_calculator import PricingCalculator

__all__ = ["AvailabilityCalculator", "PricingCalculator"]
