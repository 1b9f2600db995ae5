import requests

from utils.response import Response


def download(url, config, logger=None):
    """
    Fetch url and wrap the outcome in a Response. Never raises.

    Args:
        url: Absolute http(s) URL
        config: Configuration object (user_agent, timeout)
        logger: Logger for transport errors
    """
    try:
        resp = requests.get(
            url,
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout)
    except requests.RequestException as e:
        if logger:
            logger.error(f"Exception while downloading {url}: {e}")
        return Response(url, error=str(e))

    if not 200 <= resp.status_code < 300:
        if logger:
            logger.error(
                f"Failed to download {url} (Status code: {resp.status_code})")
        return Response(url, status=resp.status_code, error=resp.reason)

    return Response(url, status=resp.status_code, content=resp.text)
