"""
Activity Injectors

Counterparts of the inspectors: each one rewrites the same part of the
activity in place, replacing resolved template references.
"""

from typing import Any, Callable, List, Mapping

from lg_resolver.patterns import PatternRecognizer

ActivityInjector = Callable[[Any, Mapping[str, str]], None]


def _inject_field(target: Any, field: str, resolutions: Mapping[str, str]) -> None:
    value = getattr(target, field, None)
    if value:
        replaced = PatternRecognizer.replace_patterns(value, resolutions)
        if replaced != value:
            setattr(target, field, replaced)


def text_injector(activity: Any, resolutions: Mapping[str, str]) -> None:
    _inject_field(activity, "text", resolutions)


def speak_injector(activity: Any, resolutions: Mapping[str, str]) -> None:
    _inject_field(activity, "speak", resolutions)


def card_injector(activity: Any, resolutions: Mapping[str, str]) -> None:
    suggested_actions = getattr(activity, "suggested_actions", None)
    actions = getattr(suggested_actions, "actions", None) or []

    for action in actions:
        _inject_field(action, "text", resolutions)
        _inject_field(action, "display_text", resolutions)


INJECTORS: List[ActivityInjector] = [text_injector, speak_injector, card_injector]


def inject_resolutions(activity: Any, resolutions: Mapping[str, str]) -> None:
    """
    Replace template references across the whole activity, in place

    Args:
        activity: Activity to rewrite
        resolutions: Mapping of reference -> resolved text
    """
    for injector in INJECTORS:
        injector(activity, resolutions)
