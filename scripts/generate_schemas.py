"""Generate the JSON schema of the metadata document and save it to schemas/."""

import json
from pathlib import Path

from postmeta.api import metadata_json_schema


def generate_schemas():
    """Generate JSON schemas for all documents."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    metadata_schema = metadata_json_schema()
    metadata_schema_path = schemas_dir / "postdata_metadata.schema.json"
    with open(metadata_schema_path, 'w', encoding='utf-8') as f:
        json.dump(metadata_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {metadata_schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
