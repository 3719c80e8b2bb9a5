from typing import Any, Dict, Optional


class ApiResponseTemplate:
    """Utilitários para dar forma às respostas da API."""

    @staticmethod
    def success(
        data: Any = None,
        message: str = "Operação realizada com sucesso",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"success": True, "data": data, "message": message}
        if metadata:
            payload["metadata"] = dict(metadata)
        return payload

    @staticmethod
    def error(detail: str, status_code: int) -> Dict[str, Any]:
        return {
            "success": False,
            "detail": detail,
            "status_code": status_code,
        }
