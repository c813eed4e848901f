"""Shared fixtures for clinic-ai tests."""

from __future__ import annotations

import pytest

from clinic_ai.domains.treatment_summary.classifier import SectionClassifier
from clinic_ai.domains.treatment_summary.parser import StructuredTextParser

SECTION_BREAK_SUMMARY = """INTRO_SECTION:
इलेक्ट्रो-होम्योपैथी के सिद्धांतों के अनुसार, उपचार से पहले अवस्था समझना आवश्यक है।

**रोग की अवस्था: Positive (धनात्मक)**

रोगी की स्थिति Positive मानी जाती है।

---SECTION_BREAK---

**उपचार का सारांश**:
- S1 शरीर की सूजन कम करेगा
- C5 रक्त संचार सुधारेगा

---SECTION_BREAK---

**दवाओं का मिश्रण और खुराक तालिका**:

मिश्रण A (भोजन से पहले): S1, C5
Potency: D6

| समय | मिश्रण/दवा | मुख्य लाभ |
|-----|------------|-----------|
| सुबह (खाली पेट) | मिश्रण A | सूजन में कमी |
| रात (खाने के बाद) | मिश्रण B | **अच्छी नींद** |

---SECTION_BREAK---

**रोगी के लिए विशेष निर्देश**:
ठंडा पानी न पिएं।
- हल्का भोजन करें
"""

LEGACY_SUMMARY = """रोगी की प्रारंभिक जांच।

**रोग की अवस्था**:
Positive (धनात्मक) अवस्था।

1. **उपचार का सारांश**
S1 और C5 का प्रयोग।

**Dosage Table**
| Time | Medicine | Benefit |
|---|---|---|
| Morning | S1 | Relief |
"""


@pytest.fixture
def classifier() -> SectionClassifier:
    return SectionClassifier()


@pytest.fixture
def parser() -> StructuredTextParser:
    """Parser with the default SECTION_BREAK / INTRO_SECTION tokens."""
    return StructuredTextParser()


@pytest.fixture
def section_break_text() -> str:
    return SECTION_BREAK_SUMMARY


@pytest.fixture
def legacy_text() -> str:
    return LEGACY_SUMMARY
