"""Prometheus exporter for Huawei HiLink LTE modems."""
