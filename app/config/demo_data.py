"""
Demo dataset loaded by app/scripts/seed_demo.py.

Benchmark values are keyed by dimension name; dimensions themselves come from
the assessment definitions already in the database.
"""

DEMO_DATA = {
    "industries": [
        "Healthcare",
        "Manufacturing",
        "Professional Services",
        "Technology",
    ],
    "client": {
        "name": "Acme Demo Co",
        "address": "100 Main Street, Springfield",
        "primary_color": "#1f3a5f",
        "accent_color": "#f2a541",
        "require_profile": True,
    },
    "profiles": [
        {"username": "dana.manager", "name": "Dana Reyes", "email": "dana.reyes@acme-demo.test", "industry": "Technology"},
        {"username": "sam.peer", "name": "Sam Ortiz", "email": "sam.ortiz@acme-demo.test", "industry": "Technology"},
        {"username": "lee.report", "name": "Lee Chen", "email": "lee.chen@acme-demo.test", "industry": "Technology"},
        {"username": "pat.target", "name": "Pat Morgan", "email": "pat.morgan@acme-demo.test", "industry": "Technology"},
    ],
    "group": {
        "name": "Leadership 360 - Pat Morgan",
        "description": "360 feedback group rating Pat Morgan",
        "target": "pat.morgan@acme-demo.test",
        "manager": "dana.reyes@acme-demo.test",
        "members": [
            {"email": "sam.ortiz@acme-demo.test", "position": "Peer"},
            {"email": "lee.chen@acme-demo.test", "position": "Direct Report"},
            {"email": "pat.morgan@acme-demo.test", "position": "Self"},
        ],
    },
    "benchmarks": {
        "industry": "Technology",
        "values": {
            "Communication": 72.5,
            "Decision Making": 68.0,
            "Developing Others": 64.25,
            "Strategic Thinking": 70.0,
        },
    },
}
