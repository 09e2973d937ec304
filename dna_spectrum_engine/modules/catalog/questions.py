"""
The fixed 30-question table.

Each question scores exactly one archetype; every archetype is backed by
five questions. Categories only group questions for display.
"""

from dna_spectrum_engine.core.models import ArchetypeKey, Question, QuestionCategory

_CD = ArchetypeKey.COMPETITIVE_DRIVERS
_AM = ArchetypeKey.ADAPTIVE_MOVERS
_DI = ArchetypeKey.DISRUPTIVE_INNOVATORS
_RH = ArchetypeKey.RELATIONAL_HARMONIZERS
_GP = ArchetypeKey.GROUNDED_PROTECTORS
_SS = ArchetypeKey.STRUCTURED_STRATEGISTS

_INSTINCT = QuestionCategory.INSTINCT
_PRESSURE = QuestionCategory.PRESSURE
_CONNECTION = QuestionCategory.CONNECTION
_FOCUS = QuestionCategory.FOCUS

_TABLE: tuple[tuple[int, str, QuestionCategory, ArchetypeKey], ...] = (
    # Instinct & Regulation
    (1, "When a problem appears suddenly, my first instinct is to take charge before others do.", _INSTINCT, _CD),
    (2, "I notice subtle shifts in people's mood or energy before they say anything.", _INSTINCT, _RH),
    (3, "I stay calm and focused even when others are panicking.", _INSTINCT, _AM),
    (4, "When things feel uncertain, I prefer to observe before acting.", _INSTINCT, _SS),
    (5, "If something feels unfair, I can't rest until I confront it directly.", _INSTINCT, _CD),
    (6, "I often sense danger or tension that others seem to miss.", _INSTINCT, _SS),
    (7, "I thrive when things are changing quickly; routine drains me.", _INSTINCT, _AM),
    (8, "I need time alone to think before I commit to an action.", _INSTINCT, _SS),
    # Pressure & Control
    (9, "I tend to take responsibility when a group loses direction.", _PRESSURE, _CD),
    (10, "I get frustrated when plans change without explanation.", _PRESSURE, _SS),
    (11, "I find myself protecting people or projects I care about, even when it's not my role.", _PRESSURE, _GP),
    (12, "I prefer to master one thing deeply rather than juggle many things superficially.", _PRESSURE, _SS),
    (13, "I test people or systems to see if they're strong enough to trust.", _PRESSURE, _DI),
    (14, "When I feel cornered, I either fight back or withdraw completely.", _PRESSURE, _DI),
    (15, "I often take the role of peacekeeper when others argue.", _PRESSURE, _RH),
    (16, "I enjoy challenging norms just to see if a better way exists.", _PRESSURE, _DI),
    # Connection & Safety
    (17, "I read body language and tone more than words.", _CONNECTION, _RH),
    (18, "I recharge by being around people I trust.", _CONNECTION, _GP),
    (19, "I prefer harmony over winning arguments.", _CONNECTION, _RH),
    (20, "I get restless when things stay the same for too long.", _CONNECTION, _AM),
    (21, "I instinctively step in when someone looks uncomfortable or lost.", _CONNECTION, _RH),
    (22, "I have a strong sense of territory — spaces or ideas that 'belong' to me.", _CONNECTION, _DI),
    (23, "I avoid conflict unless I know I can win or protect someone.", _CONNECTION, _GP),
    (24, "I use humor to diffuse tension or test sincerity.", _CONNECTION, _DI),
    # Focus & Adaptation
    (25, "I make decisions fast and rarely second-guess.", _FOCUS, _CD),
    (26, "I notice patterns and connections others overlook.", _FOCUS, _AM),
    (27, "I like experimenting or solving problems with limited resources.", _FOCUS, _AM),
    (28, "I have a low tolerance for inefficiency or disorganization.", _FOCUS, _CD),
    (29, "I often take on too much because I trust my endurance.", _FOCUS, _GP),
    (30, "When I'm overwhelmed, I tend to shut down or freeze instead of speaking up.", _FOCUS, _GP),
)

QUESTIONS: tuple[Question, ...] = tuple(
    Question(id=qid, text=text, category=category, archetype=archetype)
    for qid, text, category, archetype in _TABLE
)
