"""Export JSON schemas for Itinerary, Activity and SynthesisRequest."""

import json
from pathlib import Path

from backend.foxtrail.models import Activity, Itinerary, SynthesisRequest


def main(schemas_dir: Path = Path("docs/schemas")) -> list[Path]:
    """Export schemas to docs/schemas/."""
    schemas_dir.mkdir(parents=True, exist_ok=True)
    written = []

    for model in (Itinerary, Activity, SynthesisRequest):
        schema = model.model_json_schema(by_alias=True)
        schema_path = schemas_dir / f"{model.__name__}.schema.json"
        with open(schema_path, "w") as f:
            json.dump(schema, f, indent=2)
        print(f"Exported {model.__name__} schema to {schema_path}")
        written.append(schema_path)

    return written


if __name__ == "__main__":
    main()
