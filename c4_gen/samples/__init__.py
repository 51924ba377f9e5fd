from .registry import SAMPLES, SampleConfig, SampleSpec, get_sample

__all__ = ["SAMPLES", "SampleConfig", "SampleSpec", "get_sample"]
