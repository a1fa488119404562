"""
Usage Examples for the Ainfinit SDK
Demonstrates configuration, signed calls and webhook parsing
"""

from ainfinit_sdk import AinfinitClient
from ainfinit_sdk.callbacks import CallbackAck, CallbackType, parse_callback
from ainfinit_sdk.config import AinfinitConfig, ConfigLoader, ConfigValidator
from ainfinit_sdk.exceptions import AinfinitError, StatusError
from ainfinit_sdk.models import OpenDoorRequest, OpenDoorType


# =============================================================================
# Example 1: Programmatic Configuration
# =============================================================================

def programmatic_config_example() -> AinfinitConfig:
    """Configure the SDK programmatically with all options"""
    loader = ConfigLoader()

    return loader.load(
        env=False,
        config={
            # Required merchant credentials
            "merchant_code": "your-merchant-code",
            "secret_key": "your-16-byte-key",

            # Transport settings
            "base_url": "https://ainfinit.mtm.mn",
            "timeout": 30000,

            # Diagnostics
            "debug": True,
            "enable_audit_log": False,
        },
    )


# =============================================================================
# Example 2: Environment Variables Configuration
# =============================================================================

def env_config_example() -> AinfinitConfig:
    """
    Load configuration from environment variables

    Set these environment variables before running:

    export AINFINIT_MERCHANT_CODE="your-merchant-code"
    export AINFINIT_SECRET_KEY="your-16-byte-key"
    export AINFINIT_TIMEOUT="60000"
    export AINFINIT_DEBUG="true"
    """
    return ConfigLoader().load(env=True)


# =============================================================================
# Example 3: Merged Configuration (File + Environment + Programmatic)
# =============================================================================

def merged_config_example() -> AinfinitConfig:
    """
    Merge configuration from multiple sources
    Priority: programmatic > environment > file
    """
    return ConfigLoader().load(
        file="./config/ainfinit_config.json",
        env=True,
        config={"timeout": 60000},
    )


# =============================================================================
# Example 4: Configuration Validation
# =============================================================================

def validation_example() -> None:
    """Validate configuration before use"""
    result = ConfigValidator().validate({"merchant_code": "your-merchant-code"})

    if not result.valid:
        print("Configuration validation failed:")
        for error in result.errors:
            print(f"  - {error.field}: {error.message}")


# =============================================================================
# Example 5: Opening a Door
# =============================================================================

def open_door_example(client: AinfinitClient) -> None:
    """Open a machine for shopping and check the door result"""
    request = OpenDoorRequest(type=OpenDoorType.SHOPPING, request_id="req-0001")

    try:
        opened = client.operations.open_door("VM001", request)
        print(f"Order code: {opened.data.order_code}")

        detail = client.operations.open_door_detail(
            "VM001", {"type": OpenDoorType.SHOPPING, "request_id": "req-0001"}
        )
        door = detail.door_status
        print(f"Door status: {door.description if door else detail.status}")
    except StatusError as e:
        print(f"Platform refused: {e.description} ({e.status})")
    except AinfinitError as e:
        print(e.get_description())


# =============================================================================
# Example 6: Handling a Webhook
# =============================================================================

def webhook_example(raw_body: bytes) -> dict:
    """Parse an order settlement notification and build the acknowledgement"""
    try:
        settlement = parse_callback(CallbackType.ORDER_SETTLEMENT, raw_body)
    except AinfinitError as e:
        return CallbackAck.failure(str(e), status=400).to_wire()

    print(f"Order {settlement.order_code}: {settlement.total_price} in total")
    return CallbackAck.success().to_wire()


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    print("=== Ainfinit SDK Examples ===\n")

    print("1. Configuration Validation:")
    validation_example()
    print()

    print("2. Webhook Handling:")
    print(webhook_example(
        b'{"orderCode": "ORD1", "handleStatus": 1,'
        b' "orderGoodsList": [{"itemCode": "6901", "itemPrice": 350, "count": 1}]}'
    ))
    print()

    print("3. Signature Header:")
    with AinfinitClient(programmatic_config_example()) as client:
        print(client.get_signature())
