"""Example skills built on alexa_skill_kit."""
