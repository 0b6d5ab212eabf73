"""login功能测试数据：用户账号、登录错误提示信息
标准用户登录成功
用户名密码不匹配
锁定用户
用户名为空
密码为空
"""
from types import MappingProxyType

from data.models import User

USERS = MappingProxyType({
    "standard": User("standard", "standard_user", "secret_sauce"),
    "locked": User("locked", "locked_out_user", "secret_sauce"),
    "problem": User("problem", "problem_user", "secret_sauce"),
    "performance": User("performance", "performance_glitch_user", "secret_sauce"),
    "invalid": User("invalid", "invalid_user", "wrong_password"),
})

LOGIN_ERRORS = MappingProxyType({
    "invalid_credentials": "Epic sadface: Username and password do not match any user in this service",
    "locked_user": "Epic sadface: Sorry, this user has been locked out.",
    "missing_username": "Epic sadface: Username is required",
    "missing_password": "Epic sadface: Password is required",
})

# 登录失败场景参数化：(username, password, 期望错误提示)
LOGIN_FAIL_CASES = MappingProxyType({
    "invalid_credentials": (USERS["invalid"].username, USERS["invalid"].password,
                            LOGIN_ERRORS["invalid_credentials"]),
    "wrong_password": (USERS["standard"].username, "12345", LOGIN_ERRORS["invalid_credentials"]),
    "locked_user": (USERS["locked"].username, USERS["locked"].password, LOGIN_ERRORS["locked_user"]),
    "empty_username_password": ("", "", LOGIN_ERRORS["missing_username"]),
    "empty_password": (USERS["standard"].username, "", LOGIN_ERRORS["missing_password"]),
})
