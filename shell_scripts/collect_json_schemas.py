#!/usr/bin/env python3

import json
from pathlib import Path

from pydantic.json_schema import model_json_schema

from password_mask import dto
from password_mask._conf import Settings


def execute(output_dir: str):
    for filename, builder in {
        Path(output_dir) / "policy_config.json": dto.PolicyConfig,
        Path(output_dir) / "validation_result.json": dto.ValidationResult,
        Path(output_dir) / "mask_description.json": dto.MaskDescription,
        Path(output_dir) / "configuration.json": Settings,
    }.items():
        filename.write_text(json.dumps(model_json_schema(builder), indent=2))
        print("generated", filename)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(
        prog="collect_json_schemas",
        description="Writes the JSON schemas of the result models to a given folder.",
    )
    parser.add_argument("output_dir")
    args = parser.parse_args()

    execute(output_dir=args.output_dir)
