"""Test configuration and fixtures."""

import logfire

# Keep telemetry local; spans and logs are still recorded by the SDK
logfire.configure(send_to_logfire=False, console=False)
