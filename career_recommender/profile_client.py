import logging
import httpx

logger = logging.getLogger(__name__)


async def push_career_path(
    base_url: str,
    user_id: str,
    career_path_id: str,
    *,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """
    Tell the profile service which career path the user was assigned and that
    the interest assessment is done. Returns False instead of raising so a
    flaky profile service never loses a computed recommendation.
    """
    url = f"{base_url}/profile/by-user/{user_id}/career-path"
    payload = {
        "current_career_path_id": career_path_id,
        "has_completed_interest_assessment": True,
    }

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            r = await client.put(url, json=payload)
    except httpx.TimeoutException:
        logger.error("Timeout calling profile service: %s", url)
        return False
    except httpx.RequestError as e:
        logger.error("Error calling profile service: %s (%s)", url, e)
        return False

    if r.status_code >= 300:
        logger.error("Profile service rejected career path update: %s -> %s", url, r.status_code)
        return False

    return True


async def fetch_user_level(
    base_url: str,
    user_id: str,
    *,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int | None:
    """
    Read the user's current level from the profile service.
    Returns None when the level cannot be established.
    """
    url = f"{base_url}/profile/by-user/{user_id}"

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            r = await client.get(url)
    except httpx.TimeoutException:
        logger.error("Timeout calling profile service: %s", url)
        return None
    except httpx.RequestError as e:
        logger.error("Error calling profile service: %s (%s)", url, e)
        return None

    if r.status_code != 200:
        logger.error("Profile lookup failed: %s -> %s", url, r.status_code)
        return None

    try:
        return int(r.json()["level"])
    except (ValueError, KeyError, TypeError):
        logger.error("Profile for user=%s has no usable level", user_id)
        return None
