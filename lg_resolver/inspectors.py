"""
Activity Inspectors

Each inspector reads one part of an activity and returns the template
references it contains. Attributes are read by name so any object shaped
like an Activity can be inspected.
"""

from typing import Any, Callable, List

from lg_resolver.patterns import PatternRecognizer

ActivityInspector = Callable[[Any], List[str]]


def text_inspector(activity: Any) -> List[str]:
    return PatternRecognizer.extract_patterns(getattr(activity, "text", None))


def speak_inspector(activity: Any) -> List[str]:
    return PatternRecognizer.extract_patterns(getattr(activity, "speak", None))


def card_inspector(activity: Any) -> List[str]:
    """References in suggested actions, each action's text then its display text"""
    suggested_actions = getattr(activity, "suggested_actions", None)
    actions = getattr(suggested_actions, "actions", None) or []

    references = []
    for action in actions:
        references.extend(PatternRecognizer.extract_patterns(getattr(action, "text", None)))
        references.extend(PatternRecognizer.extract_patterns(getattr(action, "display_text", None)))
    return references


INSPECTORS: List[ActivityInspector] = [text_inspector, speak_inspector, card_inspector]


def extract_references(activity: Any) -> List[str]:
    """
    Collect the distinct template references of an activity

    Args:
        activity: Activity to inspect

    Returns:
        References in first-seen order (text, speak, then suggested actions)
    """
    references = []
    for inspector in INSPECTORS:
        references.extend(inspector(activity))

    # dict keeps insertion order
    return list(dict.fromkeys(references))
