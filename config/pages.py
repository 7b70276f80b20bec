import os

ENV = os.getenv("ENV", "prod")

URLS = {
    "prod": {
        "store": "https://automation-interview.vercel.app/",
    },
    "local": {
        "store": "http://localhost:3000/",
    },
}

# 单独指定商店地址时覆盖环境配置
if os.getenv("STORE_URL"):
    URLS[ENV] = {**URLS.get(ENV, {}), "store": os.environ["STORE_URL"]}
