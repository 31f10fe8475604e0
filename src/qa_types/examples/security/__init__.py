from .zap_scan import RISK_LEVELS, ScanReport, ZapScanner, build_zap_client

__all__ = ["RISK_LEVELS", "ScanReport", "ZapScanner", "build_zap_client"]
