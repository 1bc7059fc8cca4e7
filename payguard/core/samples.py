# Demo messages offered by the quick-scan screen ("Try these examples")
QUICK_SCAN_EXAMPLES = (
    {
        'type': 'High Risk Fraud',
        'content': 'URGENT! Your bank account has been compromised. Click here immediately '
                   'to secure: http://fake-bank-secure.com/verify-account-now',
    },
    {
        'type': 'Prize Scam',
        'content': 'Congratulations! You have won ₹50,000 in our lucky draw. '
                   'Claim now: bit.ly/claim-prize-xyz',
    },
    {
        'type': 'Suspicious Content',
        'content': 'Hi, Your SIM will be blocked in 2 hours. Call 18001234567 to reactivate immediately.',
    },
    {
        'type': 'Government Scam',
        'content': 'Your COVID vaccination certificate is ready. Download: gov-covid-cert.in/download',
    },
    {
        'type': 'Safe Content',
        'content': 'Your Amazon order #123456789 has been dispatched. '
                   'Track: https://amazon.in/track/order/123456789',
    },
    {
        'type': 'Legitimate Bank',
        'content': 'Alert: Transaction of ₹2,500 debited from A/C **1234. '
                   'If not done by you, visit https://netbanking.hdfcbank.com',
    },
)
