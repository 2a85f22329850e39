from cms_proxy.error_handler import ConfigurationError, ErrorHandler, UpstreamHTTPError


def test_handle_exception_returns_generic_payload():
    eh = ErrorHandler()
    out = eh.handle_exception(UpstreamHTTPError(502, "bad gateway"), "monuments")
    assert out == {"error": "Failed to fetch monuments"}


def test_handle_configuration_error_reports_missing_credentials():
    eh = ErrorHandler()
    out = eh.handle_exception(ConfigurationError(["WEBFLOW_API_TOKEN"]), "ecosystem")
    assert out == {"error": "Missing API credentials"}


def test_upstream_error_message_carries_status_and_body():
    err = UpstreamHTTPError(404, "collection not found")
    assert str(err) == "Webflow API 404: collection not found"
    assert err.status_code == 404
