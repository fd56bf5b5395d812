"""Core functionality for Philips Hue Lab.

This package contains:
- config: Invocation config built from options, environment and user file
- errors: Error types and exit codes
- controller: HueController class for API interaction
- discovery: Bridge discovery and address validation
- auth: Link button key creation
- dispatcher: Validation and dispatch of device commands
"""
