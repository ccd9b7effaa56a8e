"""
Tabular export of a parsed airport.

Each feature family becomes one pandas DataFrame; ``export_csv`` writes them
as ``<ICAO>_<family>.csv`` files.
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from xplane_apt.models.airport import ParsedAirport
from xplane_apt.parsers.sign_text import parse_sign_text, generate_sign_cache_key

logger = logging.getLogger(__name__)


def runways_dataframe(airport: ParsedAirport) -> pd.DataFrame:
    return pd.DataFrame([runway.to_dict() for runway in airport.runways])


def frequencies_dataframe(airport: ParsedAirport) -> pd.DataFrame:
    return pd.DataFrame([
        {'type': freq.type.value, 'frequency': freq.frequency, 'name': freq.name}
        for freq in airport.frequencies
    ])


def startup_locations_dataframe(airport: ParsedAirport) -> pd.DataFrame:
    return pd.DataFrame([
        {
            'name': loc.name,
            'latitude': loc.latitude,
            'longitude': loc.longitude,
            'heading': loc.heading,
            'location_type': loc.location_type,
            'airplane_types': loc.airplane_types,
        }
        for loc in airport.startup_locations
    ])


def signs_dataframe(airport: ParsedAirport) -> pd.DataFrame:
    """One row per sign with the decoded faces rendered as cache keys."""
    rows = []
    for sign in airport.signs:
        decoded = parse_sign_text(sign.text)
        rows.append({
            'latitude': sign.latitude,
            'longitude': sign.longitude,
            'heading': sign.heading,
            'size': sign.size,
            'text': sign.text,
            'front': generate_sign_cache_key(decoded.front, sign.size),
            'back': generate_sign_cache_key(decoded.back, sign.size) if decoded.has_back else None,
        })
    return pd.DataFrame(rows)


def linear_features_dataframe(airport: ParsedAirport) -> pd.DataFrame:
    return pd.DataFrame([feature.to_dict() for feature in airport.linear_features])


def pavements_dataframe(airport: ParsedAirport) -> pd.DataFrame:
    return pd.DataFrame([
        {
            'name': pavement.name,
            'surface_type': pavement.surface_type,
            'smoothness': pavement.smoothness,
            'texture_orientation': pavement.texture_orientation,
            'vertex_count': len(pavement.coordinates),
            'hole_count': len(pavement.holes),
        }
        for pavement in airport.pavements
    ])


EXPORTERS = {
    'runways': runways_dataframe,
    'frequencies': frequencies_dataframe,
    'startup_locations': startup_locations_dataframe,
    'signs': signs_dataframe,
    'linear_features': linear_features_dataframe,
    'pavements': pavements_dataframe,
}


def airport_to_dataframes(airport: ParsedAirport) -> Dict[str, pd.DataFrame]:
    """Build every table for an airport, keyed by feature family."""
    return {name: exporter(airport) for name, exporter in EXPORTERS.items()}


def export_csv(airport: ParsedAirport, output_dir: Union[str, Path]) -> List[Path]:
    """
    Write the non-empty tables of an airport as CSV files.

    Args:
        airport: Parsed airport
        output_dir: Directory to write into; created when missing

    Returns:
        Paths of the files written
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    prefix = airport.id or 'airport'

    written = []
    for name, df in airport_to_dataframes(airport).items():
        if df.empty:
            logger.debug(f"No {name} for {prefix}, skipping")
            continue
        path = output_dir / f"{prefix}_{name}.csv"
        df.to_csv(path, index=False)
        written.append(path)
        logger.info(f"Wrote {len(df)} {name} to {path}")
    return written
