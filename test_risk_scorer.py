import pytest

from payguard.core.risk_scorer import RiskScorer
from payguard.schemas import RiskLevel

FAKE_BANK = (
    "URGENT! Your bank account has been compromised. Click here immediately "
    "to secure: http://fake-bank-secure.com/verify-account-now"
)
PRIZE_SCAM = (
    "Congratulations! You have won ₹50,000 in our lucky draw. "
    "Claim now: bit.ly/claim-prize-xyz"
)
AMAZON_ORDER = (
    "Your Amazon order #123456789 has been dispatched. "
    "Track: https://amazon.in/track/order/123456789"
)
SIM_BLOCK = "Hi, Your SIM will be blocked in 2 hours. Call 18001234567 to reactivate immediately."


@pytest.fixture
def scorer():
    return RiskScorer()


# ============================================================================
# WORKED EXAMPLES
# ============================================================================

def test_fake_bank_is_fraud(scorer):
    verdict = scorer.analyze(FAKE_BANK)
    assert verdict.risk_level == RiskLevel.FRAUD
    assert verdict.risk_score == 100
    assert 'Phishing keyword: "urgent"' in verdict.detected_threats
    assert "Potential financial phishing" in verdict.detected_threats
    assert "Dangerous domain detected: fake-bank-secure.com" in verdict.ai_insights
    assert verdict.confidence == 95
    assert verdict.ai_insights[-1] == "High confidence analysis (95%)"


def test_prize_scam_is_fraud(scorer):
    verdict = scorer.analyze(PRIZE_SCAM)
    assert verdict.risk_level == RiskLevel.FRAUD
    assert verdict.risk_score == 85
    assert verdict.detected_threats == (
        "Shortened URL service",
        'Phishing keyword: "congratulations"',
        'Phishing keyword: "won"',
        'Phishing keyword: "prize"',
        'Phishing keyword: "lucky draw"',
    )
    assert verdict.confidence == 80


def test_amazon_order_is_safe(scorer):
    verdict = scorer.analyze(AMAZON_ORDER)
    assert verdict.risk_level == RiskLevel.SAFE
    assert verdict.risk_score == 0
    assert verdict.detected_threats == ()
    assert verdict.ai_insights == ("Trusted domain verified: amazon.in",)


def test_plain_message_scores_zero(scorer):
    verdict = scorer.analyze("See you at 6pm")
    assert verdict.risk_score == 0
    assert verdict.risk_level == RiskLevel.SAFE
    assert verdict.detected_threats == ()
    assert verdict.confidence == 80


def test_sim_block_is_suspicious(scorer):
    verdict = scorer.analyze(SIM_BLOCK)
    assert verdict.risk_level == RiskLevel.SUSPICIOUS
    assert verdict.risk_score == 65


# ============================================================================
# AGGREGATION
# ============================================================================

@pytest.mark.parametrize("content", ["", None])
def test_empty_content(scorer, content):
    verdict = scorer.analyze(content)
    assert verdict.risk_score == 0
    assert verdict.risk_level == RiskLevel.SAFE
    assert verdict.detected_threats == ()
    assert verdict.ai_insights == ()


def test_trusted_credit_never_goes_below_zero(scorer):
    content = (
        "https://amazon.in https://flipkart.com https://hdfcbank.com "
        "https://icicibank.com https://axisbank.com"
    )
    verdict = scorer.analyze(content)
    assert verdict.risk_score == 0
    assert verdict.risk_level == RiskLevel.SAFE
    assert len(verdict.ai_insights) == 5


def test_trusted_link_only_is_safe(scorer):
    verdict = scorer.analyze("Visit https://flipkart.com/offers today")
    assert verdict.risk_level == RiskLevel.SAFE
    assert "Trusted domain verified: flipkart.com" in verdict.ai_insights


def test_short_trusted_domain_scores_as_shortened(scorer):
    # amazon.com is trusted but also has the short-domain shape; shortened wins
    verdict = scorer.analyze("Visit amazon.com")
    assert verdict.risk_score == 25
    assert verdict.risk_level == RiskLevel.SAFE
    assert verdict.detected_threats == ()
    assert verdict.ai_insights == (
        "Suspicious URL pattern: amazon.com",
        "Low confidence - manual review recommended",
    )


def test_duplicate_threats_are_kept(scorer):
    verdict = scorer.analyze("bit.ly/a and bit.ly/b")
    assert verdict.risk_score == 50
    assert verdict.detected_threats == ("Shortened URL service", "Shortened URL service")


def test_sender_tags_come_last(scorer):
    verdict = scorer.analyze("Your reward is waiting", sender="REWARD")
    assert verdict.risk_score == 30
    assert verdict.detected_threats == (
        'Phishing keyword: "reward"',
        "Potential sender impersonation",
    )


def test_low_confidence_insight(scorer):
    verdict = scorer.analyze("Share your OTP and CVV")
    assert verdict.risk_score == 40
    assert verdict.confidence == 40
    assert verdict.ai_insights == (
        "Requests sensitive information",
        "Low confidence - manual review recommended",
    )


def test_extract_urls(scorer):
    urls = scorer.extract_urls("Go to www.example.com or https://x.org/a?b=1 and bit.ly/z. Thanks.")
    assert urls == ["www.example.com", "https://x.org/a?b=1", "bit.ly/z."]


# ============================================================================
# CLASSIFICATION
# ============================================================================

@pytest.mark.parametrize("score, level, confidence", [
    (0, RiskLevel.SAFE, 80),
    (44, RiskLevel.SAFE, 36),
    (45, RiskLevel.SUSPICIOUS, 60),
    (74, RiskLevel.SUSPICIOUS, 85),
    (75, RiskLevel.FRAUD, 70),
    (100, RiskLevel.FRAUD, 95),
])
def test_classify_boundaries(scorer, score, level, confidence):
    assert scorer.classify(score) == (level, confidence)


@pytest.mark.parametrize("content", [FAKE_BANK, PRIZE_SCAM, AMAZON_ORDER, SIM_BLOCK, "x" * 50])
def test_bounds_and_idempotence(scorer, content):
    first = scorer.analyze(content, "SBI-BANK")
    second = scorer.analyze(content, "SBI-BANK")
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()
    assert 0 <= first.risk_score <= 100
    assert 0 <= first.confidence <= 100


def test_json_uses_camel_case(scorer):
    data = scorer.analyze(FAKE_BANK).model_dump(by_alias=True, mode="json")
    assert set(data) == {"riskLevel", "riskScore", "detectedThreats", "confidence", "aiInsights"}
    assert data["riskLevel"] == "fraud"
    assert isinstance(data["detectedThreats"], list)
