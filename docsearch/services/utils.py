import json


def normalize_metadata(meta: dict) -> dict:
    """Flatten metadata into the scalar values the vector index accepts."""
    normalized = {}
    for k, v in meta.items():
        if v is None:
            continue
        if isinstance(v, list):
            normalized[k] = ", ".join(map(str, v))
        elif isinstance(v, dict):
            normalized[k] = json.dumps(v)
        else:
            normalized[k] = v
    return normalized
