from pydantic import BaseModel

from dspstats.services.descriptive import Weight


# Output schema for a descriptive summary
class DescriptiveSummary(BaseModel):
    count: int       # Number of samples
    weight: Weight   # Denominator convention used for var/std
    mean: float      # Mean value
    var: float       # Variance
    std: float       # Standard deviation

    model_config = {"frozen": True}
