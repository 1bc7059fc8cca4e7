import re
import logging

from payguard.schemas import SenderFinding

logger = logging.getLogger(__name__)

# Placeholders callers use when no real sender is known
PLACEHOLDER_SENDERS = frozenset({'Quick Scan Analysis', 'Unknown'})

SUSPICIOUS_NUMBER_FRAGMENTS = ('+91-99999', '88888')
IMPERSONATION_TOKENS = ('BANK', 'GOV', 'GOVT', 'PAYTM', 'AMAZON', 'REWARD')


class SenderAnalyzer:
    """Phone-number and sender-ID (e.g. VK-HDFCBK) checks"""

    def __init__(self):
        self.phone_pattern = re.compile(r'^\+?\d{10,15}$')

    def analyze_sender(self, sender: str) -> SenderFinding:
        if not sender:
            return SenderFinding()

        if self.is_phone_number(sender):
            if any(fragment in sender for fragment in SUSPICIOUS_NUMBER_FRAGMENTS):
                logger.debug(f"Sender {sender!r} matches a known-bad number pattern")
                return SenderFinding(score=25, threat_tags=('Suspicious phone number pattern',))
        elif sender not in PLACEHOLDER_SENDERS:
            upper = sender.upper()
            if any(token in upper for token in IMPERSONATION_TOKENS):
                logger.debug(f"Sender ID {sender!r} uses a brand/authority token")
                return SenderFinding(score=15, threat_tags=('Potential sender impersonation',))

        return SenderFinding()

    def is_phone_number(self, sender: str) -> bool:
        """Optional leading '+' and 10-15 digits, nothing else"""
        return bool(self.phone_pattern.match(sender))
