# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import AIConfig, AppConfig, AuthConfig, DatabaseConfig, SecurityConfig, load_config

__all__ = ["AIConfig", "AppConfig", "AuthConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
