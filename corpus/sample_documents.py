"""
Small built-in HTML documents for unit tests and dry runs.
Each entry mirrors the DocumentEntry schema used by CorpusLoader.
"""

from __future__ import annotations
from typing import List, Dict, Any

# ---------------------------------------------------------------------------
# Format:
#   {
#     "id": str,
#     "html": str,                  # rich-text editor output
#     "candidate_name": str,        # optional
#     "assignment_name": str,       # optional
#   }
# ---------------------------------------------------------------------------

SAMPLE_DOCUMENTS: List[Dict[str, Any]] = [
    {
        "id": "essay_001",
        "candidate_name": "Alex Morgan",
        "assignment_name": "Causes of the French Revolution",
        "html": (
            "<h1>The French Revolution</h1>"
            "<p>The French Revolution was a period of radical political and societal change in "
            "France that began with the Estates General of 1789 and ended with the formation of "
            "the French Consulate in November 1799. Many of its ideas are considered fundamental "
            "principles of liberal democracy, while the values and institutions it created remain "
            "central to modern French political discourse.</p>"
            "<p>Its causes are generally agreed to be a combination of social, political, and "
            "economic factors which the existing regime proved unable to manage. Financial crisis "
            "and widespread social distress led to the convocation of the Estates General in May "
            "1789. The Storming of the Bastille on 14 July led to a series of radical measures by "
            "the Assembly, among them the abolition of feudalism.</p>"
            "<p>The next three years were dominated by the struggle for political control, made "
            "worse by economic depression. Military defeats following the outbreak of the French "
            "Revolutionary Wars in April 1792 resulted in the insurrection of 10 August 1792. "
            "The monarchy was abolished and replaced by the First Republic in September.</p>"
        ),
    },
    {
        "id": "report_002",
        "candidate_name": "Sam Rivera",
        "assignment_name": "Lab Report",
        "html": (
            "<h2>Photosynthesis</h2>"
            "<p>Photosynthesis is the process by which green plants and certain other organisms "
            "transform light energy into chemical energy. During photosynthesis in green plants, "
            "light energy is captured and used to convert water, carbon dioxide, and minerals into "
            "oxygen and energy-rich organic compounds.</p>"
            "<ul><li>The light-dependent reactions take place in the thylakoid membranes.</li>"
            "<li>The Calvin cycle takes place in the stroma of the chloroplast.</li></ul>"
            "<p>It would be impossible to overestimate the importance of photosynthesis in the "
            "maintenance of life on Earth. If photosynthesis ceased, there would soon be little "
            "food or other organic matter on Earth. Most organisms would disappear, and in time "
            "the atmosphere would become nearly devoid of gaseous oxygen.</p>"
        ),
    },
    {
        "id": "letter_003",
        "candidate_name": "",
        "assignment_name": "Formal Letter",
        "html": (
            "<p>Dear Ms. Patel,</p>"
            "<p>I am writing to apply for the position of <strong>library assistant</strong> "
            "that was advertised on your website last week. I have worked in a busy school "
            "library for two years, and I believe that my experience with cataloguing and with "
            "helping readers would make me a strong candidate.</p>"
            "<p>In my current role I manage the returns desk, organise reading events for "
            "younger students, and keep the online catalogue up to date. I enjoy this work "
            "because it allows me to help people find what they need. I would welcome the "
            "chance to bring these skills to your team.</p>"
            "<p>Thank you for considering my application. I look forward to hearing from you.</p>"
            "<p>Yours sincerely,<br>Jordan Lee</p>"
        ),
    },
]
