"""
Identifier rules shared by every registered entity.
"""

from typing import Any, Optional


def identifier_problem(identifier: Any) -> Optional[str]:
    """
    Check an identifier against the registry's format rules.

    Args:
        identifier: Candidate identifier

    Returns:
        Description of the violated rule, or None if the identifier is valid
    """
    if not isinstance(identifier, str) or not identifier:
        return "Identifier must be a non-empty string."
    if any(ch.isspace() for ch in identifier):
        return "Identifier must not contain any spaces."
    if any(ch.isupper() for ch in identifier):
        return "Identifier must be completely lowercase."
    return None


def is_valid_identifier(identifier: Any) -> bool:
    return identifier_problem(identifier) is None
