"""
Utility functions for the Family-Care Leave Subsidy Eligibility Service
"""

from .coercion import (
    parse_boolean,
    parse_number,
    parse_array,
    coerce_model_data,
    build_scenario_input,
    build_situation,
    build_composite_request
)

__all__ = [
    "parse_boolean",
    "parse_number",
    "parse_array",
    "coerce_model_data",
    "build_scenario_input",
    "build_situation",
    "build_composite_request"
]
