"""Business profile loader for the name and address printed on labels."""
import yaml
from pathlib import Path

from label_creator.data_layer.exceptions import BusinessProfileError
from label_creator.data_layer.models import BusinessInfo


class BusinessProfileLoader:
    """Loader for the business profile from YAML."""

    def __init__(self, yaml_path: str):
        """Initialize business profile loader from YAML file.

        Args:
            yaml_path: Path to YAML file containing the business profile
        """
        self.yaml_path = Path(yaml_path)

    def load(self) -> BusinessInfo:
        """Load the business profile from YAML file.

        Returns:
            BusinessInfo object (fields absent from the file are empty)

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            BusinessProfileError: If the file has no ``business`` mapping
        """
        with open(self.yaml_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict) or not isinstance(data.get("business"), dict):
            raise BusinessProfileError(str(self.yaml_path), "missing 'business' section")

        business = data["business"]

        # Zip codes and phone numbers are often written unquoted in YAML
        def field(key: str) -> str:
            value = business.get(key)
            return "" if value is None else str(value).strip()

        return BusinessInfo(
            business_name=field("name"),
            business_address=field("address"),
            business_city=field("city"),
            business_state=field("state").upper(),
            business_zip=field("zip"),
            business_phone=field("phone"),
        )
