"""
Coercion of loosely-typed request parameters into the typed scenario inputs
"""
import json
import logging
import math
import typing
from typing import Any, Callable, Dict, List, Optional

from ..models.scenario import ScenarioId, SCENARIO_INPUTS
from ..models.evaluation import CompatibilitySituation, CompositeRequest

logger = logging.getLogger(__name__)

# Prefixes of the flat complete-evaluation parameters
FLAT_PREFIXES = {
    ScenarioId.FIRST_DEGREE_CARE: "supuestoA_",
    ScenarioId.THIRD_CHILD: "supuestoB_",
    ScenarioId.SECOND_CHILD_DISABILITY: "supuestoC_",
    ScenarioId.ADOPTION_FOSTERING: "supuestoCAdopcion_",
    ScenarioId.MULTIPLE_BIRTH: "supuestoD_",
    ScenarioId.SINGLE_PARENT: "supuestoE_",
}

# A flat sub-request is built only when one of these fields is present
FLAT_TRIGGERS = {
    ScenarioId.FIRST_DEGREE_CARE: ("relacionFamiliar",),
    ScenarioId.THIRD_CHILD: ("numeroHijos",),
    ScenarioId.SECOND_CHILD_DISABILITY: ("numeroHijos",),
    ScenarioId.ADOPTION_FOSTERING: ("esAdopcion", "esAcogimiento"),
    ScenarioId.MULTIPLE_BIRTH: ("numeroHijos",),
    ScenarioId.SINGLE_PARENT: ("esMonoparental", "numeroHijos"),
}

SITUATION_TRIGGERS = (
    "tieneOtrasAyudasPublicas",
    "tienePrestacionesSeguridadSocial",
    "tieneAyudaDependencia",
    "tieneConvenioEspecialCuidadores",
)


def parse_boolean(value: Any) -> Optional[bool]:
    """
    Coerce a value to a boolean

    Accepts booleans and the strings "true"/"false" in any case. Anything else
    is treated as absent.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return None


def parse_number(value: Any) -> Optional[float]:
    """
    Coerce a value to a finite number

    Accepts ints, floats and numeric strings. Booleans, non-numeric strings
    and non-finite values are treated as absent.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_array(value: Any, item_parser: Optional[Callable[[Any], Any]] = None) -> Optional[List[Any]]:
    """
    Coerce a value to a list

    Accepts lists and JSON array strings. Items are run through item_parser
    and the ones it rejects are dropped. Parse failures yield None.
    """
    if isinstance(value, (list, tuple)):
        items = list(value)
    elif isinstance(value, str):
        try:
            items = json.loads(value)
        except json.JSONDecodeError:
            return None
        if not isinstance(items, list):
            return None
    else:
        return None

    if item_parser is None:
        return items
    parsed = [item_parser(item) for item in items]
    return [item for item in parsed if item is not None]


def _coerce_field(annotation, value: Any) -> Any:
    if annotation is bool:
        return parse_boolean(value)
    if annotation in (int, float):
        return parse_number(value)
    if annotation is str:
        return value if isinstance(value, str) else None
    if typing.get_origin(annotation) is list:
        item_type = typing.get_args(annotation)[0]
        if item_type is bool:
            return parse_array(value, parse_boolean)
        return parse_array(value, parse_number)
    return value


def coerce_model_data(model_class, params: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """
    Coerce loose parameters for a pydantic model

    Fields are looked up by alias (optionally prefixed) or by attribute name.
    Values that cannot be coerced are left out so the model defaults apply.
    """
    data = {}
    for name, field in model_class.model_fields.items():
        if name == "scenario":
            continue
        alias = field.alias or name
        for key in (prefix + alias, prefix + name):
            if key in params and params[key] is not None:
                coerced = _coerce_field(field.annotation, params[key])
                if coerced is None:
                    logger.debug(f"Ignoring unparseable value for {key}: {params[key]!r}")
                else:
                    data[name] = coerced
                break
    return data


def build_scenario_input(scenario: ScenarioId, params: Dict[str, Any], prefix: str = ""):
    """Build the typed input of a scenario from loose parameters"""
    model_class = SCENARIO_INPUTS[scenario]
    return model_class(**coerce_model_data(model_class, params, prefix))


def build_situation(params: Dict[str, Any], prefix: str = "") -> CompatibilitySituation:
    return CompatibilitySituation(**coerce_model_data(CompatibilitySituation, params, prefix))


def _is_present(params: Dict[str, Any], key: str) -> bool:
    return params.get(key) is not None


def build_composite_request(params: Dict[str, Any]) -> CompositeRequest:
    """
    Build a composite request from the flat prefixed parameter set

    e.g. {"supuestoB_numeroHijos": "3", "supuestoB_edadesHijos": "[0, 2, 5]",
    "tieneAyudaDependencia": "true"}
    """
    scenarios = []
    for scenario, prefix in FLAT_PREFIXES.items():
        triggers = FLAT_TRIGGERS[scenario]
        if scenario == ScenarioId.FIRST_DEGREE_CARE:
            # An empty relation does not count as supplied
            present = bool(params.get(prefix + triggers[0]))
        else:
            present = any(_is_present(params, prefix + key) for key in triggers)
        if present:
            scenarios.append(build_scenario_input(scenario, params, prefix))

    situation = None
    if any(_is_present(params, key) for key in SITUATION_TRIGGERS):
        situation = build_situation(params)

    return CompositeRequest(scenarios=scenarios, situation=situation)
