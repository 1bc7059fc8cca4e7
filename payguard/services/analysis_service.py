import time
import asyncio
import logging
from typing import Optional

from payguard.core.risk_scorer import RiskScorer
from payguard.schemas import RiskVerdict
from payguard.config import settings

logger = logging.getLogger(__name__)


class AnalysisService:
    def __init__(self, delay_seconds: Optional[float] = None):
        self.risk_scorer = RiskScorer()
        self.delay_seconds = settings.ANALYSIS_DELAY_SECONDS if delay_seconds is None else delay_seconds

    def analyze(self, content: str, sender: str = 'Unknown') -> RiskVerdict:
        """Synchronous scan pipeline"""
        start_time = time.time()

        verdict = self.risk_scorer.analyze(content, sender)

        processing_time = time.time() - start_time
        logger.info(
            f"✓ Scan complete in {processing_time * 1000:.1f}ms - "
            f"Verdict: {verdict.risk_level.value} ({verdict.risk_score}/100)"
        )
        return verdict

    async def analyze_async(self, content: str, sender: str = 'Unknown') -> RiskVerdict:
        """
        Scan after the configured cosmetic delay.
        Cancelling the awaiting task drops the result.
        """
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return self.analyze(content, sender)
