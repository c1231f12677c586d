"""Application-wide constants and configuration defaults.

This module centralizes magic values and default configurations that are
used across the codebase.
"""

# =============================================================================
# Singleton Strategies
# =============================================================================
STRATEGY_DOUBLE_CHECKED = "double_checked"
STRATEGY_LOCKED = "locked"
STRATEGY_EAGER = "eager"
DEFAULT_SINGLETON_STRATEGY = STRATEGY_DOUBLE_CHECKED

# =============================================================================
# Concurrency Harness
# =============================================================================
DEFAULT_STRESS_THREADS = 50
DEFAULT_CONSTRUCTION_DELAY_MS = 5
DEFAULT_BARRIER_TIMEOUT_SECONDS = 30.0

# =============================================================================
# Demo Defaults
# =============================================================================
DEFAULT_PAYMENT_AMOUNT = 100.0
DEFAULT_NOTIFICATION_MESSAGE = "Your order has shipped"

# =============================================================================
# Logging
# =============================================================================
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
