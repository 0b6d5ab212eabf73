from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    role: str
    username: str
    password: str


@dataclass(frozen=True)
class Product:
    key: str
    name: str  # 必须与页面显示文本完全一致


@dataclass(frozen=True)
class CustomerInfo:
    first_name: str
    last_name: str
    postal_code: str
