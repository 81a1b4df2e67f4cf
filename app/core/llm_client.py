from openai import OpenAI, OpenAIError
from functools import lru_cache
from fastapi import HTTPException
from app.core.config import settings
from app.core.logger import logger
from app.utils.ai_itinerary import SYSTEM_PROMPT


@lru_cache
def get_client() -> OpenAI:
    return OpenAI(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.BASE_URL,
    )


def get_ai_completion(prompt: str, premium: bool = False) -> str:
    model = settings.AI_PREMIUM_MODEL if premium else settings.AI_MODEL
    try:
        response = get_client().chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=settings.AI_TEMPERATURE,
            max_tokens=settings.AI_MAX_TOKENS,
        )
    except OpenAIError as e:
        logger.error(f"LLM backend error: {e}")
        raise HTTPException(status_code=502, detail="AI model is temporarily unavailable.")
    logger.info(f"LLM response received from {model}")

    if not response.choices:
        logger.error("No choices returned from LLM")
        raise ValueError("LLM did not return any content.")

    return response.choices[0].message.content or ""
