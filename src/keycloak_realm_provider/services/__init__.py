"""
Reconciliation services: field codec, planner and resource controllers.
"""

from .base_controller import BaseController
from .field_codec import FieldCodec
from .planner import Plan, PlanAction, diff_fields, plan
from .realm_controller import RealmController

__all__ = [
    "BaseController",
    "FieldCodec",
    "Plan",
    "PlanAction",
    "RealmController",
    "diff_fields",
    "plan",
]
