"""
Security example: drive an OWASP ZAP proxy against a target.

Sequence (each step is one or two ZAP API calls):
  1. new session        core.new_session
  2. access the target  urlopen (so ZAP has the site in its tree)
  3. spider             spider.scan + spider.status polling until 100%
  4. active scan        ascan.scan + ascan.status polling until 100%
  5. alert count        core.number_of_alerts

The test then asserts the count is zero. ZAP itself does all the probing; this module only sequences
the calls, waits for them, and turns ZAP's string responses into numbers and errors.

ZAP must be running with its API enabled, e.g.
    docker run -p 8080:8080 ghcr.io/zaproxy/zaproxy:stable zap.sh -daemon -host 0.0.0.0 -port 8080 \
        -config api.key=changeme -config api.addrs.addr.name=.* -config api.addrs.addr.regex=true
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable

import requests
from zapv2 import ZAPv2

from qa_types.config.settings import Settings
from qa_types.exceptions.base import ScanError, ScanTimeoutError

logger = logging.getLogger(__name__)

RISK_LEVELS = ("High", "Medium", "Low", "Informational")


def build_zap_client(settings: Settings) -> ZAPv2:
    """ZAP API client talking to the proxy at settings.ZAP_PROXY_URL."""
    apikey = settings.ZAP_API_KEY.get_secret_value() if settings.ZAP_API_KEY else None
    return ZAPv2(apikey=apikey, proxies=settings.zap_proxies)


@dataclass(frozen=True)
class ScanReport:
    target: str
    alert_count: int
    alerts_by_risk: dict[str, int] = field(default_factory=dict)
    spider_scan_id: str | None = None
    active_scan_id: str | None = None

    @property
    def is_clean(self) -> bool:
        return self.alert_count == 0


class ZapScanner:
    """
    Sequences spider / active-scan / alert calls on a ZAPv2 client.

    Args:
        client: a `zapv2.ZAPv2` instance (or anything with the same attributes).
        poll_interval: seconds between status polls.
        timeout: upper bound in seconds for each of the spider and the active scan.
        sleep: injectable sleep function.
    """

    def __init__(
        self,
        client: Any,
        *,
        poll_interval: float = 2.0,
        timeout: float = 600.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.poll_interval = poll_interval
        self.timeout = timeout
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings) -> "ZapScanner":
        return cls(
            build_zap_client(settings),
            poll_interval=settings.ZAP_POLL_INTERVAL,
            timeout=settings.ZAP_TIMEOUT,
        )

    # ----------------------------------------------------------------------
    # Internals
    # ----------------------------------------------------------------------

    def _call(self, what: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except requests.exceptions.RequestException as exc:
            logger.error("scan.api_unreachable", extra={"call": what, "error": str(exc)})
            raise ScanError(f"ZAP API call {what} failed: {exc}") from exc
        except (ValueError, KeyError) as exc:
            # zapv2 decodes every answer as JSON and unpacks it; an HTML error page or an
            # unexpected shape surfaces here
            logger.error("scan.api_bad_response", extra={"call": what, "error": repr(exc)})
            raise ScanError(f"ZAP API call {what} returned an unusable response: {exc!r}") from exc

    @staticmethod
    def _scan_id(what: str, response: Any) -> str:
        # ZAP answers with the numeric scan id, or with an error text such as "URL_NOT_FOUND"
        scan_id = str(response).strip()
        if not scan_id.isdigit():
            raise ScanError(f"{what} was not started, ZAP answered {scan_id!r}")
        return scan_id

    @staticmethod
    def _as_int(what: str, response: Any) -> int:
        try:
            return int(str(response).strip())
        except ValueError:
            raise ScanError(f"{what} returned a non-numeric value {response!r}") from None

    def _wait(self, phase: str, status: Callable[[str], Any], scan_id: str) -> None:
        deadline = time.monotonic() + self.timeout
        progress = 0
        while True:
            progress = self._as_int(f"{phase} status", self._call(f"{phase}.status", status, scan_id))
            logger.debug("scan.progress", extra={"phase": phase, "scan_id": scan_id, "progress": progress})
            if progress >= 100:
                return
            if time.monotonic() >= deadline:
                logger.error("scan.timeout", extra={"phase": phase, "scan_id": scan_id, "progress": progress})
                raise ScanTimeoutError(phase, self.timeout, progress)
            self._sleep(self.poll_interval)

    # ----------------------------------------------------------------------
    # Steps
    # ----------------------------------------------------------------------

    def new_session(self, name: str = "qa-types") -> None:
        self._call("core.new_session", self.client.core.new_session, name=name, overwrite=True)
        logger.info("scan.session.new", extra={"session": name})

    def access(self, target: str) -> None:
        self._call("urlopen", self.client.urlopen, target)

    def spider(self, target: str) -> str:
        """Crawl the target and wait until the spider reports 100%. Returns the scan id."""
        logger.info("scan.spider.start", extra={"target": target})
        scan_id = self._scan_id("spider", self._call("spider.scan", self.client.spider.scan, url=target))
        self._wait("spider", self.client.spider.status, scan_id)
        logger.info("scan.spider.done", extra={"target": target, "scan_id": scan_id})
        return scan_id

    def active_scan(self, target: str) -> str:
        """Run the active scanner against the target and wait for completion. Returns the scan id."""
        logger.info("scan.active.start", extra={"target": target})
        scan_id = self._scan_id("active scan", self._call("ascan.scan", self.client.ascan.scan, url=target))
        self._wait("active scan", self.client.ascan.status, scan_id)
        logger.info("scan.active.done", extra={"target": target, "scan_id": scan_id})
        return scan_id

    def alert_count(self, target: str) -> int:
        return self._as_int(
            "alert count",
            self._call("core.number_of_alerts", self.client.core.number_of_alerts, baseurl=target),
        )

    def alerts_by_risk(self, target: str) -> dict[str, int]:
        """Alerts per risk level ("High", "Medium", "Low", "Informational"), zeros included."""
        alerts = self._call("core.alerts", self.client.core.alerts, baseurl=target) or []
        counts = Counter(alert.get("risk", "Informational") for alert in alerts)
        return {risk: counts.get(risk, 0) for risk in RISK_LEVELS}

    def run(self, target: str, *, session_name: str = "qa-types") -> ScanReport:
        """New session, access, spider, active scan, alert count - in that order."""
        target = target.rstrip("/")
        self.new_session(session_name)
        self.access(target)
        spider_id = self.spider(target)
        active_id = self.active_scan(target)
        count = self.alert_count(target)
        by_risk = self.alerts_by_risk(target) if count else {risk: 0 for risk in RISK_LEVELS}

        report = ScanReport(
            target=target,
            alert_count=count,
            alerts_by_risk=by_risk,
            spider_scan_id=spider_id,
            active_scan_id=active_id,
        )
        log = logger.info if report.is_clean else logger.warning
        log("scan.completed", extra={"target": target, "alert_count": count, "alerts_by_risk": by_risk})
        return report
