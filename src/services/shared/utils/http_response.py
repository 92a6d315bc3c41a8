import json


def api_response(status_code: int, body: dict | list | int) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(status_code: int, error: str, message: str) -> dict:
    """エラーレスポンスを生成する"""
    return api_response(status_code, {"error": error, "errorMessage": message})
