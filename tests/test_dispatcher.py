"""Unit tests for language dispatch (jupiter_registry.dispatcher).

Tests cover:
- golang routed to GolangProvisioner
- nodejs prints a warning and runs nothing
- Unsupported and differently-cased languages raise UnsupportedLanguageError
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from jupiter_registry.dispatcher import process_service
from jupiter_registry.errors import UnsupportedLanguageError
from jupiter_registry.models import ServiceDescriptor


def _descriptor(language: str) -> ServiceDescriptor:
    return ServiceDescriptor(
        app_name="sample-svc",
        programming_language=language,
        framework="",
        module="",
    )


class TestProcessService:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_golang_uses_provisioner(self, config):
        descriptor = _descriptor("golang")
        with patch("jupiter_registry.dispatcher.GolangProvisioner") as provisioner_cls:
            provisioner_cls.return_value.provision = AsyncMock()
            await process_service(descriptor, config)
        provisioner_cls.assert_called_once_with(config)
        provisioner_cls.return_value.provision.assert_awaited_once_with(descriptor)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_nodejs_is_a_warning_only(self, config, fake_exec, capsys):
        await process_service(_descriptor("nodejs"), config)
        assert fake_exec.commands == []
        assert "NodeJS processing not implemented yet" in capsys.readouterr().out

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize("language", ["python", "", "Golang", "GOLANG", "NodeJS", "golang "])
    async def test_unsupported_language(self, config, fake_exec, language):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            await process_service(_descriptor(language), config)
        assert exc_info.value.language == language
        assert f"unsupported programming language: {language}" in str(exc_info.value)
        assert fake_exec.commands == []
