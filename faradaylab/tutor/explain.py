"""
Natural-language explanation of the current lab state.

A short prompt with the snapshot values is sent to the Gemini generateContent
REST endpoint. Every failure is converted to a fixed fallback text: this
module never raises to its caller and never touches the simulation.
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import aiohttp
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
API_KEY_ENV = "GEMINI_API_KEY"
ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

MISSING_KEY_MESSAGE = "API Key is missing. Please configure the environment to use the AI tutor."
UNAVAILABLE_MESSAGE = "The AI tutor is currently unavailable. Please check your connection or API key."
EMPTY_RESPONSE_MESSAGE = "I couldn't generate an explanation at this moment."


@dataclass(frozen=True)
class ExplanationRequest:
    """Values the tutor explains."""

    emf: float
    flux: float
    velocity: float
    turns: int

    @classmethod
    def from_state(cls, state: Any) -> "ExplanationRequest":
        """Build from a SimulationState, using the displayed (smoothed) EMF."""
        return cls(
            emf=float(state.emf_display),
            flux=float(state.flux),
            velocity=float(state.velocity),
            turns=int(state.turns),
        )


def build_prompt(request: ExplanationRequest) -> str:
    return (
        "You are a physics tutor explaining Faraday's Law of Induction to a student "
        "looking at a simulation.\n\n"
        "Current Simulation State:\n"
        f"- Induced EMF: {request.emf:.2f} Volts (Arbitrary Units)\n"
        f"- Magnetic Flux: {request.flux:.2f} Weber (Arbitrary Units)\n"
        f"- Magnet Velocity: {request.velocity:.2f} units/s\n"
        f"- Number of Coil Turns: {request.turns}\n\n"
        "Based on this specific moment, explain what is happening.\n"
        "- If EMF is near zero but Flux is high, explain why (rate of change is zero).\n"
        "- If EMF is high, explain the relationship between speed, turns, and flux change.\n"
        "- Keep it brief (max 3 sentences), encouraging, and educational.\n"
        "- Do not use LaTeX formatting, just plain text.\n"
    )


def extract_text(payload: Any) -> str:
    """Concatenate the text parts of the first candidate; '' if there are none."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts).strip()


class ExplanationService:
    """Client for the text-generation API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout: float = 30.0,
    ) -> None:
        """
        Args:
            api_key: API key; default read from GEMINI_API_KEY (a .env file is honored)
            model: model name
            timeout: total request timeout in seconds
        """
        if api_key is None:
            load_dotenv()
            api_key = os.getenv(API_KEY_ENV, "")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return ENDPOINT.format(model=self.model)

    async def explain(self, request: ExplanationRequest, session: Optional[Any] = None) -> str:
        """
        Explanation text for ``request``, or a fallback message.

        Args:
            request: snapshot values
            session: aiohttp.ClientSession (or compatible); a private one is
                opened when None
        """
        if not self.api_key:
            return MISSING_KEY_MESSAGE
        try:
            if session is None:
                timeout = aiohttp.ClientTimeout(total=self.timeout)
                async with aiohttp.ClientSession(timeout=timeout) as own_session:
                    text = await self._generate(own_session, request)
            else:
                text = await self._generate(session, request)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Explanation request failed: %s", e)
            return UNAVAILABLE_MESSAGE
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Malformed explanation response: %s", e)
            return UNAVAILABLE_MESSAGE
        return text or EMPTY_RESPONSE_MESSAGE

    async def _generate(self, session: Any, request: ExplanationRequest) -> str:
        payload = {"contents": [{"parts": [{"text": build_prompt(request)}]}]}
        logger.debug("Requesting explanation from %s", self.model)
        async with session.post(
            self.endpoint,
            params={"key": self.api_key},
            json=payload,
        ) as response:
            response.raise_for_status()
            body = await response.json()
        return extract_text(body)
