# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict

LanguageCode: TypeAlias = str
LocalizedText: TypeAlias = dict[LanguageCode, str]


class TaskRecord(TypedDict):
    title: LocalizedText
    time: str
    description: LocalizedText
    status: str


class TaskDisplay(TypedDict):
    title: str
    time: str
    description: str
    status: str
    tier: str


class ClockEntry(TypedDict):
    title: str
    time: str
