import re
import logging
from typing import List, Tuple

from payguard.core.url_analyzer import URLAnalyzer
from payguard.core.content_analyzer import ContentPatternAnalyzer
from payguard.core.sender_analyzer import SenderAnalyzer
from payguard.schemas import Reputation, RiskLevel, RiskVerdict

logger = logging.getLogger(__name__)


class RiskScorer:
    def __init__(self):
        """
        Initialize RiskScorer with its analyzers and verdict thresholds
        """
        self.url_analyzer = URLAnalyzer()
        self.content_analyzer = ContentPatternAnalyzer()
        self.sender_analyzer = SenderAnalyzer()

        # Points contributed per URL finding
        self.url_weights = {
            'dangerous': 40,
            'suspicious': 25,
            'trusted': -10,
        }

        # Verdict thresholds (inclusive lower bounds)
        self.thresholds = {
            'fraud': 75,
            'suspicious': 45
        }

        # http(s)://..., www...., or a bare label.tld token
        self.url_pattern = re.compile(
            r'(?:https?://\S+|www\.\S+|[a-zA-Z0-9-]+\.[a-zA-Z]{2,}\S*)',
            re.IGNORECASE
        )

    def analyze(self, content: str, sender: str = 'Unknown') -> RiskVerdict:
        """
        Score a message and classify it

        Args:
            content: Raw message text (SMS body, pasted message or link)
            sender: Claimed sender (phone number or sender ID)

        Returns:
            RiskVerdict with score clamped to [0, 100]
        """
        content = content or ''
        threats: List[str] = []
        insights: List[str] = []

        # 1. URLs
        url_score = 0
        for url in self.extract_urls(content):
            finding = self.url_analyzer.analyze_url(url)

            if finding.is_dangerous or finding.reputation == Reputation.MALICIOUS:
                url_score += self.url_weights['dangerous']
                threats.extend(finding.threat_tags)
                insights.append(f"Dangerous domain detected: {finding.domain}")
            elif finding.reputation == Reputation.SUSPICIOUS or finding.is_shortened:
                url_score += self.url_weights['suspicious']
                threats.extend(finding.threat_tags)
                insights.append(f"Suspicious URL pattern: {finding.domain}")
            elif finding.reputation == Reputation.TRUSTED:
                url_score += self.url_weights['trusted']
                insights.append(f"Trusted domain verified: {finding.domain}")

        # 2. Content
        content_finding = self.content_analyzer.analyze_content(content)
        threats.extend(content_finding.threat_tags)
        insights.extend(content_finding.insights)

        # 3. Sender (tags only)
        sender_finding = self.sender_analyzer.analyze_sender(sender)
        threats.extend(sender_finding.threat_tags)

        total = url_score + content_finding.score + sender_finding.score
        risk_score = self._clamp(round(total))
        risk_level, confidence = self.classify(risk_score)

        if confidence > 85:
            insights.append(f"High confidence analysis ({confidence}%)")
        elif confidence < 60:
            insights.append("Low confidence - manual review recommended")

        logger.debug(
            f"Breakdown url={url_score} content={content_finding.score} "
            f"sender={sender_finding.score} -> {risk_score} ({risk_level.value})"
        )

        return RiskVerdict(
            risk_level=risk_level,
            risk_score=risk_score,
            detected_threats=tuple(threats),
            confidence=confidence,
            ai_insights=tuple(insights),
        )

    def extract_urls(self, content: str) -> List[str]:
        return self.url_pattern.findall(content or '')

    def classify(self, risk_score: int) -> Tuple[RiskLevel, int]:
        """Map a clamped score to (risk level, confidence)"""
        if risk_score >= self.thresholds['fraud']:
            confidence = min(95, 70 + (risk_score - self.thresholds['fraud']))
            level = RiskLevel.FRAUD
        elif risk_score >= self.thresholds['suspicious']:
            confidence = min(85, 60 + (risk_score - self.thresholds['suspicious']))
            level = RiskLevel.SUSPICIOUS
        else:
            confidence = min(90, 80 - risk_score)
            level = RiskLevel.SAFE
        return level, self._clamp(confidence)

    @staticmethod
    def _clamp(value: int, low: int = 0, high: int = 100) -> int:
        return max(low, min(high, value))
