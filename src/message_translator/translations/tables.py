"""
Translation tables for backend (Supabase Auth / PostgREST) messages.

Keys are the literal upstream messages, values are the user-facing
Portuguese text.

The order of ERROR_TRANSLATIONS matters: partial matching walks the table
top to bottom and returns the first key contained in the incoming message.
SUCCESS_TRANSLATIONS is only ever looked up by exact key.
"""

from types import MappingProxyType
from typing import Mapping

# =================================================================================================================
# Error messages
# =================================================================================================================

_ERROR_TRANSLATIONS: dict[str, str] = {
    # Auth errors
    "Invalid login credentials": "Email ou senha incorretos",
    "Email not confirmed": "Email não confirmado. Verifique sua caixa de entrada",
    "User already registered": "Este email já está cadastrado",
    "Password should be at least 6 characters": "A senha deve ter pelo menos 6 caracteres",
    "Unable to validate email address: invalid format": "Formato de email inválido",
    "Email rate limit exceeded": "Muitas tentativas. Tente novamente mais tarde",
    "Invalid email or password": "Email ou senha incorretos",
    "Email link is invalid or has expired": "Link de email inválido ou expirado",
    "Token has expired or is invalid": "Sessão expirada. Faça login novamente",
    "User not found": "Usuário não encontrado",
    "New password should be different from the old password": "A nova senha deve ser diferente da anterior",
    "Password is too weak": "Senha muito fraca. Use letras, números e símbolos",
    "Signup requires a valid password": "É necessária uma senha válida",
    "User already exists": "Usuário já existe",
    "Email address is invalid": "Endereço de email inválido",
    "Only an email address or phone number should be provided": "Forneça apenas email ou telefone",

    # Network errors
    "Failed to fetch": "Erro de conexão. Verifique sua internet",
    "Network request failed": "Falha na conexão. Tente novamente",
    "timeout": "Tempo esgotado. Tente novamente",

    # Database errors
    "duplicate key value": "Este registro já existe",
    "violates foreign key constraint": "Erro de referência no banco de dados",
    "violates not-null constraint": "Campo obrigatório não preenchido",

    # Generic errors
    "An error occurred": "Ocorreu um erro",
    "Something went wrong": "Algo deu errado",
    "Internal server error": "Erro interno do servidor",
    "Service unavailable": "Serviço temporariamente indisponível",
}

# =================================================================================================================
# Success messages
# =================================================================================================================

_SUCCESS_TRANSLATIONS: dict[str, str] = {
    "Check your email for the confirmation link": "Verifique seu email para confirmar sua conta",
    "Password updated successfully": "Senha atualizada com sucesso",
    "Email updated successfully": "Email atualizado com sucesso",
    "User updated successfully": "Usuário atualizado com sucesso",
}

# Read-only views; dicts keep insertion order, which is the partial-match priority.
ERROR_TRANSLATIONS: Mapping[str, str] = MappingProxyType(_ERROR_TRANSLATIONS)
SUCCESS_TRANSLATIONS: Mapping[str, str] = MappingProxyType(_SUCCESS_TRANSLATIONS)


__all__ = ["ERROR_TRANSLATIONS", "SUCCESS_TRANSLATIONS"]
