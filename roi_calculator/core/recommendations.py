"""
ROI Band Engine - chart colours and report recommendations.

Bands are configuration (config/roi_bands.yaml), not hardcoded thresholds.
A missing or malformed file falls back to built-in defaults with a warning.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from roi_calculator.config.settings import settings
from roi_calculator.models.schemas import Recommendation

logger = logging.getLogger("ROIBandEngine")
logger.setLevel(logging.INFO)


DEFAULT_BANDS: Dict[str, Any] = {
    "agent_roi_bands": [
        {"name": "excellent", "min_roi": 500, "color": "rgba(34, 197, 94, 0.8)",
         "recommendations": ["Excellent automation candidate with exceptional ROI potential"]},
        {"name": "strong", "min_roi": 200, "color": "rgba(59, 130, 246, 0.8)",
         "recommendations": ["Strong automation candidate with good ROI potential"]},
        {"name": "moderate", "min_roi": 100, "color": "rgba(168, 85, 247, 0.8)",
         "recommendations": ["Moderate automation potential worth considering"]},
        {"name": "limited", "min_roi": 50, "color": "rgba(245, 158, 11, 0.8)",
         "recommendations": ["Limited automation potential - proceed with caution"]},
        {"name": "low", "min_roi": 0, "color": "rgba(34, 197, 94, 0.6)",
         "recommendations": ["Low automation potential based on current analysis"]},
    ],
    "negative_band": {
        "name": "negative",
        "color": "rgba(239, 68, 68, 0.8)",
        "recommendations": ["Low automation potential based on current analysis"],
    },
    "org_impact": {
        "multiplier": 5,
        "recommendation": "High organizational impact - consider enterprise-wide implementation",
    },
}


class ROIBandEngine:
    """Maps an agent ROI percentage to its band, colour and recommendation text."""

    def __init__(self, bands_file: Optional[Path] = None):
        self.config = self._load_yaml(bands_file or settings.ROI_BANDS_FILE)
        self._validate_config()
        logger.info(f"ROIBandEngine initialized: {len(self.bands)} agent-ROI bands")

    @staticmethod
    def _load_yaml(filepath: Path) -> Dict[str, Any]:
        """Load and parse the YAML band table."""
        try:
            if not filepath.exists():
                logger.warning(f"Band file not found: {filepath}. Using built-in defaults.")
                return {}

            with open(filepath, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
                if not isinstance(data, dict):
                    raise ValueError(f"YAML file {filepath.name} must parse to a dict.")
                return data

        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load {filepath.name}: {e}")
            return {}

    def _validate_config(self):
        """Fill any missing section from DEFAULT_BANDS."""
        for key, default in DEFAULT_BANDS.items():
            if not self.config.get(key):
                logger.warning(f"'{key}' missing from band config. Using default.")
                self.config[key] = default

        # Evaluated top-down, so keep the highest threshold first
        self.config["agent_roi_bands"] = sorted(
            self.config["agent_roi_bands"],
            key=lambda band: band.get("min_roi", 0),
            reverse=True
        )

    @property
    def bands(self) -> List[Dict[str, Any]]:
        return self.config["agent_roi_bands"]

    def band_for(self, agent_roi: float) -> Dict[str, Any]:
        for band in self.bands:
            if agent_roi >= band.get("min_roi", 0):
                return band
        return self.config["negative_band"]

    def color_for(self, agent_roi: float) -> str:
        return self.band_for(agent_roi).get("color", "")

    def recommend(self, agent_roi: float, org_roi: float) -> Recommendation:
        """
        Report recommendations for a scenario.
        Adds the organisational-impact note when org ROI dwarfs agent ROI.
        """
        band = self.band_for(agent_roi)
        items = list(band.get("recommendations", []))

        org_impact = self.config["org_impact"]
        if org_roi > agent_roi * org_impact.get("multiplier", 5):
            items.append(org_impact["recommendation"])

        return Recommendation(band=band.get("name", "unknown"), items=items)


# Singleton instance
_band_engine_instance = None

def get_band_engine() -> ROIBandEngine:
    """Get or create singleton band engine instance."""
    global _band_engine_instance
    if _band_engine_instance is None:
        _band_engine_instance = ROIBandEngine()
    return _band_engine_instance
