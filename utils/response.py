class Response(object):
    """
    Outcome of a single page download.

    A failed download is a value, not an exception: status is None when
    the request never got an HTTP answer and error carries the reason.
    """

    def __init__(self, url, status=None, content="", error=None):
        self.url = url
        self.status = status
        self.content = content or ""
        self.error = error

    @property
    def ok(self):
        """True for a 2xx answer with a non-empty body."""
        if self.status is None or not 200 <= self.status < 300:
            return False
        return bool(self.content)

    def __repr__(self):
        return f"Response(url={self.url!r}, status={self.status}, error={self.error!r})"
