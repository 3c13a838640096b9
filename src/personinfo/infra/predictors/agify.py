"""Age prediction via agify.io."""
from __future__ import annotations

import logging

from personinfo.domain.exceptions import InvalidSubjectError
from personinfo.infra.predictors.base import PredictionClient

logger = logging.getLogger(__name__)


class AgifyClient(PredictionClient):
    op = "predictors.agify.age"

    def age(self, name: str) -> int:
        logger.info("predicting age for %r", name)
        body = self._get(name)
        age = body.get("age")
        if not isinstance(age, int) or isinstance(age, bool) or age <= 0:
            raise InvalidSubjectError(f"{self.op}: no age prediction for {name!r}")
        return age
