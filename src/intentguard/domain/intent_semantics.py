"""Intent semantics: executable rules for classifying query terms.

These constants lock the semantics. Tests in test_intent_semantics.py encode
them as assertions to prevent accidental drift.

RULES (evaluated in order, first match wins):
---------------------------------------------

1. BRAND
   Any brand allowlist token contained in the term -> keep.
   Matched tokens carry a "brand:" prefix so reports can tell brand keeps
   from policy keeps. The token appears as configured, not lowercased.

2. ALLOW
   Any allow token contained -> keep. All matching allow tokens are reported.
   Allow beats suspicious: "private group tour" is kept.

3. SUSPICIOUS
   Any suspicious token contained -> block_candidate. All matching
   suspicious tokens are reported.

4. UNCERTAIN
   Nothing matched -> uncertain. Never auto-excluded; left for review.

Matching is case-insensitive substring containment, not whole words.
"""

KEEP = "keep"
BLOCK_CANDIDATE = "block_candidate"
UNCERTAIN = "uncertain"

BRAND_TAG_PREFIX = "brand:"

# Rule names for reference in tests and audit
RULE_BRAND_OVERRIDE = "brand: brand allowlist token contained -> keep (wins over all)"
RULE_ALLOW_BEATS_SUSPICIOUS = "allow: allow token contained -> keep (wins over suspicious)"
RULE_SUSPICIOUS_BLOCK = "suspicious: suspicious token contained, no allow/brand -> block_candidate"
RULE_UNCERTAIN_NEVER_EXCLUDED = "uncertain: no token contained -> uncertain, never excluded"
RULE_SUBSTRING_CONTAINMENT = "match: case-insensitive substring containment, multi-word tokens allowed"
