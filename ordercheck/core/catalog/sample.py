"""Built-in sample catalog: platforms, clamps and controllers."""


from typing import Any

from .loader import catalog_from_dict
from .models import Catalog

SAMPLE_CATEGORIES: list[dict[str, Any]] = [
    {
        "id": "platform",
        "name": "Platform",
        "properties": [
            {"key": "lengthCm", "label": "Platform Length (cm)", "kind": "number", "min": 50, "max": 500, "required": True},
            {"key": "maxLoadKg", "label": "Max Load (kg)", "kind": "number", "min": 100, "max": 2000, "required": True},
            {"key": "isOutdoorRated", "label": "Outdoor Rated", "kind": "boolean", "required": True},
        ],
    },
    {
        "id": "clamp",
        "name": "Clamp",
        "properties": [
            {"key": "sizeCm", "label": "Clamp Size (cm)", "kind": "number", "min": 1, "max": 20, "required": True},
            {"key": "maxTorqueNm", "label": "Max Torque (Nm)", "kind": "number", "min": 10, "max": 200, "required": True},
            {"key": "isAutomatic", "label": "Automatic Mode", "kind": "boolean", "required": True},
        ],
    },
    {
        "id": "controller",
        "name": "Controller",
        "properties": [
            {"key": "maxChannels", "label": "Max Channels", "kind": "number", "min": 1, "max": 16, "required": True},
            {"key": "supportsAutomaticClamps", "label": "Supports Automatic Clamps", "kind": "boolean", "required": True},
            {"key": "hasBatteryBackup", "label": "Battery Backup", "kind": "boolean", "required": True},
        ],
    },
]

SAMPLE_PRODUCTS: list[dict[str, Any]] = [
    {
        "id": "platform-modern-200",
        "name": "Modern Platform 200",
        "categoryId": "platform",
        "properties": {"lengthCm": 200, "maxLoadKg": 500, "isOutdoorRated": True},
        "dependencies": [
            {
                "categoryId": "clamp",
                "minCount": 4,
                "propertyConstraints": [{"key": "sizeCm", "kind": "number", "min": 8}],
            },
            {
                "categoryId": "controller",
                "minCount": 1,
                "propertyConstraints": [{"key": "maxChannels", "kind": "number", "min": 4}],
            },
        ],
    },
    {
        "id": "platform-compact-120",
        "name": "Compact Platform 120",
        "categoryId": "platform",
        "properties": {"lengthCm": 120, "maxLoadKg": 300, "isOutdoorRated": False},
        "dependencies": [
            {
                "categoryId": "clamp",
                "minCount": 2,
                "propertyConstraints": [{"key": "sizeCm", "kind": "number", "min": 5}],
            },
            {"categoryId": "controller", "minCount": 1},
        ],
    },
    {
        "id": "clamp-auto-10",
        "name": "AutoClamp 10",
        "categoryId": "clamp",
        "properties": {"sizeCm": 10, "maxTorqueNm": 50, "isAutomatic": True},
        "dependencies": [
            {
                "categoryId": "controller",
                "minCount": 1,
                "propertyConstraints": [{"key": "supportsAutomaticClamps", "kind": "boolean", "value": True}],
            },
        ],
    },
    {
        "id": "clamp-manual-5",
        "name": "ManualClamp 5",
        "categoryId": "clamp",
        "properties": {"sizeCm": 5, "maxTorqueNm": 30, "isAutomatic": False},
    },
    {
        "id": "controller-basic-4",
        "name": "Basic Controller 4",
        "categoryId": "controller",
        "properties": {"maxChannels": 4, "supportsAutomaticClamps": False, "hasBatteryBackup": False},
    },
    {
        "id": "controller-pro-8",
        "name": "Pro Controller 8",
        "categoryId": "controller",
        "properties": {"maxChannels": 8, "supportsAutomaticClamps": True, "hasBatteryBackup": True},
    },
]


def sample_catalog() -> Catalog:
    return catalog_from_dict({"categories": SAMPLE_CATEGORIES, "products": SAMPLE_PRODUCTS})


__all__ = ["SAMPLE_CATEGORIES", "SAMPLE_PRODUCTS", "sample_catalog"]
