"""Reference data — element type families, allow-lists, and the TOGAF ADM sequence.

This is the encoded framework knowledge that makes validation deterministic.
All tables are immutable and compiled in; none of them is configurable.
"""

# ──────────────────────────────────────────────────────────────────────
# C4
# ──────────────────────────────────────────────────────────────────────

C4_CONTEXT = "c4_context"
C4_CONTAINER = "c4_container"
C4_COMPONENT = "c4_component"

C4_PERSON_TYPES = frozenset({"c4_person"})
C4_SYSTEM_TYPES = frozenset({"c4_system", "c4_external_system"})
C4_CONTAINER_TYPES = frozenset({"c4_container", "c4_database", "c4_message_queue", "c4_api"})
C4_COMPONENT_TYPES = frozenset({"c4_component", "c4_service"})

# ──────────────────────────────────────────────────────────────────────
# ArchiMate
# ──────────────────────────────────────────────────────────────────────

ARCHIMATE_LAYERS = frozenset({
    "business",
    "application",
    "technology",
    "motivation",
    "strategy",
})

ARCHIMATE_RELATIONSHIP_TYPES = frozenset({
    "serving", "realization", "triggering", "flow", "access",
    "composition", "aggregation", "assignment",
    "serves", "triggers", "accesses", "association", "influences", "realizes",
})

ARCHIMATE_BUSINESS_TYPES = frozenset({
    "business_actor",
    "business_role",
    "business_process",
    "business_function",
    "business_service",
    "business_object",
    "archimate_business_actor",
    "archimate_business_role",
    "archimate_business_process",
    "archimate_business_service",
    "archimate_business_object",
})

ARCHIMATE_APPLICATION_TYPES = frozenset({
    "application_component",
    "application_service",
    "application_interface",
    "data_object",
    "archimate_application_component",
    "archimate_application_service",
    "archimate_application_interface",
    "archimate_data_object",
})

ARCHIMATE_TECHNOLOGY_TYPES = frozenset({
    "technology_node",
    "technology_device",
    "technology_service",
    "system_software",
    "artifact",
    "archimate_technology_node",
    "archimate_technology_service",
    "archimate_technology_artifact",
    "archimate_technology_network",
})

_MOTIVATION_STRATEGY_NAMES = (
    "stakeholder", "driver", "goal", "principle", "requirement", "constraint",
)

ARCHIMATE_MOTIVATION_TYPES = frozenset(
    list(_MOTIVATION_STRATEGY_NAMES)
    + [f"archimate_{name}" for name in _MOTIVATION_STRATEGY_NAMES]
)

ARCHIMATE_ELEMENT_TYPES = (
    ARCHIMATE_BUSINESS_TYPES
    | ARCHIMATE_APPLICATION_TYPES
    | ARCHIMATE_TECHNOLOGY_TYPES
    | ARCHIMATE_MOTIVATION_TYPES
)

# ──────────────────────────────────────────────────────────────────────
# TOGAF
# ──────────────────────────────────────────────────────────────────────

TOGAF_PHASE = "togaf_phase"
TOGAF_DELIVERABLE = "togaf_deliverable"
TOGAF_BUILDING_BLOCK = "togaf_building_block"

# Architecture Development Method, in execution order
ADM_PHASE_ORDER = (
    "preliminary",
    "architecture_vision",
    "business_architecture",
    "is_architecture",
    "technology_architecture",
    "opportunities_and_solutions",
    "migration_planning",
    "implementation_governance",
    "architecture_change_management",
    "requirements_management",
)

BUILDING_BLOCK_MARKERS = ("abb", "sbb")

# ──────────────────────────────────────────────────────────────────────
# BPMN
# ──────────────────────────────────────────────────────────────────────

BPMN_START_EVENT = "bpmn_start_event"
BPMN_END_EVENT = "bpmn_end_event"

BPMN_GATEWAY_TYPES = frozenset({"bpmn_gateway", "bpmn_exclusive_gateway", "bpmn_parallel_gateway"})
BPMN_TASK_TYPES = frozenset({"bpmn_task", "bpmn_service_task", "bpmn_user_task"})

# Minimum outgoing flows for a gateway to actually branch
GATEWAY_MIN_OUTGOING = 2
