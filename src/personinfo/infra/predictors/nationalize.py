"""Nationality prediction via nationalize.io.

The upstream answers with a ranked list of ``{"country_id", "probability"}``
candidates; the single most probable one wins, ties going to the earliest.
"""
from __future__ import annotations

import logging
from typing import Any

from personinfo.domain.exceptions import InvalidSubjectError
from personinfo.infra.predictors.base import PredictionClient

logger = logging.getLogger(__name__)


def pick_country(candidates: list[dict[str, Any]]) -> str | None:
    best_id: str | None = None
    best_probability: float | None = None
    for candidate in candidates:
        probability = candidate.get("probability")
        country_id = candidate.get("country_id")
        if not isinstance(probability, (int, float)) or isinstance(probability, bool):
            continue
        if not isinstance(country_id, str) or not country_id:
            continue
        if best_probability is None or probability > best_probability:
            best_probability = probability
            best_id = country_id
    return best_id or None


class NationalizeClient(PredictionClient):
    op = "predictors.nationalize.nationality"

    def nationality(self, name: str) -> str:
        logger.info("predicting nationality for %r", name)
        body = self._get(name)
        candidates = body.get("country") or []
        if not isinstance(candidates, list):
            candidates = []
        country = pick_country([c for c in candidates if isinstance(c, dict)])
        if country is None:
            raise InvalidSubjectError(f"{self.op}: no nationality prediction for {name!r}")
        return country
