# SPDX-License-Identifier: MIT

from typing import Optional

import typer


def validate_month(month: Optional[int]) -> Optional[int]:
    if month is None:
        return None
    if not (1 <= month <= 12):
        raise typer.BadParameter("Month must be between 1 and 12 (inclusive)")
    return month


def validate_year(year: Optional[int]) -> Optional[int]:
    if year is None:
        return None
    if not (1 <= year <= 9999):
        raise typer.BadParameter("Year must be between 1 and 9999 (inclusive)")
    return year


def validate_latitude(latitude: Optional[float]) -> Optional[float]:
    if latitude is None:
        return None
    if not (-90.0 <= latitude <= 90.0):
        raise typer.BadParameter("Latitude must be between -90 and 90")
    return latitude


def validate_longitude(longitude: Optional[float]) -> Optional[float]:
    if longitude is None:
        return None
    if not (-180.0 <= longitude <= 180.0):
        raise typer.BadParameter("Longitude must be between -180 and 180")
    return longitude


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise typer.BadParameter(
            "Log level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return log_level.upper()
