"""Print the OpenAPI schema of the betaalservice API as JSON."""

import json
import sys
from typing import Any

from betaalservice.main import app


def generate_openapi() -> dict[str, Any]:
    return app.openapi()


def main() -> int:
    json.dump(generate_openapi(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
