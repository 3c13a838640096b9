"""Gender prediction via genderize.io."""
from __future__ import annotations

import logging

from personinfo.domain.exceptions import InvalidSubjectError
from personinfo.infra.predictors.base import PredictionClient

logger = logging.getLogger(__name__)


class GenderizeClient(PredictionClient):
    op = "predictors.genderize.gender"

    def gender(self, name: str) -> str:
        logger.info("predicting gender for %r", name)
        body = self._get(name)
        gender = body.get("gender")
        if not isinstance(gender, str) or not gender:
            raise InvalidSubjectError(f"{self.op}: no gender prediction for {name!r}")
        return gender
