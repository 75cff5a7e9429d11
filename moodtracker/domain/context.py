# moodtracker/domain/context.py
"""
Location context analysis: how each environment relates to function level.

Standard locations are always present (zero entries allowed). A custom
location label ("Other" + customLocation) gets its own bucket, and entries
without a location land in "Unknown".
"""
from __future__ import annotations

from typing import Dict, Iterable

from moodtracker.domain.function_level import function_level_descriptor
from moodtracker.domain.models import JournalEntry, Location, LocationStats, LocationSummary


def analyze_locations(entries: Iterable[JournalEntry]) -> LocationSummary:
    stats: Dict[str, LocationStats] = {
        loc.value: LocationStats(label=loc.value) for loc in Location
    }

    for entry in entries:
        label = entry.location_label
        s = stats.get(label)
        if s is None:
            s = stats[label] = LocationStats(label=label)

        level = entry.function_level
        ts = entry.utc_timestamp

        s.count += 1
        s.function_levels.append(level)
        s.over_time[entry.date_key] = s.over_time.get(entry.date_key, 0) + level
        s.time_of_day[ts.hour] = s.time_of_day.get(ts.hour, 0) + 1

    for s in stats.values():
        if s.function_levels:
            s.average = sum(s.function_levels) / len(s.function_levels)
            s.min_level = min(s.function_levels)
            s.max_level = max(s.function_levels)
        s.descriptor = function_level_descriptor(s.average)

    return LocationSummary(locations=stats)
