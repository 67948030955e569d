"""Skill request/response envelope, intent handlers and dispatch."""

from nationality_guesser.skill.envelope import SkillRequest, SkillResponse
from nationality_guesser.skill.router import IntentRouter

__all__ = ["IntentRouter", "SkillRequest", "SkillResponse"]
