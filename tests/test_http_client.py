import unittest
from unittest.mock import Mock, patch

import requests

from dcos_checks.checks.results import TransportError
from dcos_checks.http_client import URLFields, build_url, http_request
from dcos_checks.models import CLIConfigFlags


class BuildUrlTests(unittest.TestCase):
    def test_plain_http_without_port(self) -> None:
        url = build_url(CLIConfigFlags(), URLFields("leader.mesos", "/service/x"))
        self.assertEqual(url, "http://leader.mesos/service/x")

    def test_force_tls_switches_scheme_and_keeps_port(self) -> None:
        url = build_url(
            CLIConfigFlags(force_tls=True),
            URLFields("leader.mesos", "service/x", port=443),
        )
        self.assertEqual(url, "https://leader.mesos:443/service/x")

    def test_master_tls_default_port_is_implicit(self) -> None:
        url = build_url(
            CLIConfigFlags(force_tls=True), URLFields("leader.mesos", "/service/x")
        )
        self.assertEqual(url, "https://leader.mesos/service/x")

    def test_agent_role_uses_agent_admin_router_ports(self) -> None:
        cases = [
            (CLIConfigFlags(role="agent"), "http://leader.mesos:61001/ping"),
            (
                CLIConfigFlags(role="agent", force_tls=True),
                "https://leader.mesos:61002/ping",
            ),
        ]
        for cfg, expected in cases:
            with self.subTest(force_tls=cfg.force_tls):
                self.assertEqual(build_url(cfg, URLFields("leader.mesos", "/ping")), expected)

    def test_explicit_port_beats_role_default(self) -> None:
        url = build_url(
            CLIConfigFlags(role="agent", force_tls=True),
            URLFields("leader.mesos", "/ping", port=443),
        )
        self.assertEqual(url, "https://leader.mesos:443/ping")


class HttpRequestTests(unittest.TestCase):
    def test_returns_status_and_body(self) -> None:
        response = Mock(status_code=200, content=b"ok")
        cfg = CLIConfigFlags(timeout_s=2.5)
        with patch(
            "dcos_checks.http_client.requests.get", return_value=response
        ) as mock_get:
            status, body = http_request(cfg, URLFields("leader.mesos", "/ping"))

        self.assertEqual((status, body), (200, b"ok"))
        mock_get.assert_called_once_with(
            "http://leader.mesos/ping", timeout=2.5, verify=True
        )

    def test_agent_request_targets_agent_port(self) -> None:
        response = Mock(status_code=200, content=b"")
        with patch(
            "dcos_checks.http_client.requests.get", return_value=response
        ) as mock_get:
            http_request(CLIConfigFlags(role="agent"), URLFields("leader.mesos", "/ping"))

        self.assertEqual(mock_get.call_args.args[0], "http://leader.mesos:61001/ping")

    def test_ca_cert_is_used_for_verification(self) -> None:
        response = Mock(status_code=200, content=b"")
        cfg = CLIConfigFlags(force_tls=True, ca_cert="/run/dcos/pki/CA/ca-bundle.crt")
        with patch(
            "dcos_checks.http_client.requests.get", return_value=response
        ) as mock_get:
            http_request(cfg, URLFields("leader.mesos", "/ping", port=443))

        self.assertEqual(
            mock_get.call_args.kwargs["verify"], "/run/dcos/pki/CA/ca-bundle.crt"
        )

    def test_request_exception_becomes_transport_error(self) -> None:
        with patch(
            "dcos_checks.http_client.requests.get",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            with self.assertRaises(TransportError) as ctx:
                http_request(CLIConfigFlags(), URLFields("leader.mesos", "/ping"))

        self.assertIn("ConnectionError", str(ctx.exception))
        self.assertIn("connection refused", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)


if __name__ == "__main__":
    unittest.main()
