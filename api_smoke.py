"""
冒烟脚本：对运行中的中继服务逐项发请求并打印响应
用法：先启动服务 python main.py，再运行 python api_smoke.py
"""
import json
import sys

import requests

BASE_URL = "http://localhost:8000"

def print_response(title, response):
    """打印响应信息"""
    print(f"\n{'='*60}")
    print(f"{title}")
    print(f"{'='*60}")
    print(f"状态码: {response.status_code}")
    try:
        data = response.json()
        print(f"响应: {json.dumps(data, ensure_ascii=False, indent=2)}")
    except ValueError:
        print(f"响应: {response.text[:300]}")
    print(f"{'='*60}\n")

def check_basics():
    """检查预检、说明页和非法方法"""
    print("\n\n🌐 测试基础接口")

    response = requests.options(BASE_URL)
    print_response("1. OPTIONS 预检", response)
    print(f"CORS: {response.headers.get('Access-Control-Allow-Origin')}")

    response = requests.get(BASE_URL)
    print(f"2. GET 说明页: {response.status_code}, {len(response.text)} 字节")

    response = requests.put(BASE_URL, json={})
    print_response("3. PUT（应返回 405）", response)

    response = requests.post(BASE_URL, json={})
    print_response("4. 空请求体（应返回 400）", response)

def check_simple_chat(prompt):
    """检查简化聊天格式"""
    print("\n\n💬 测试简化聊天")

    response = requests.post(BASE_URL, json={"prompt": "test"})
    print_response("1. 连通性自检", response)

    response = requests.post(BASE_URL, json={"prompt": prompt})
    print_response("2. 简化聊天", response)

def check_graphql():
    """检查 GraphQL 风格查询"""
    print("\n\n🔎 测试 GraphQL 查询")

    response = requests.post(BASE_URL, json={"query": "query { models { id ownedBy } }"})
    print_response("1. 模型列表", response)
    if response.status_code == 200 and "data" in response.json():
        models = response.json()["data"]["models"]
        print(f"✅ 共 {len(models)} 个模型")

    chat_data = {
        "query": "query Chat($messages: [MessageInput!]!) { chat(messages: $messages) { id } }",
        "variables": {
            "messages": [{"role": "user", "content": "用一句话介绍你自己"}],
            "maxTokens": 128,
        },
    }
    response = requests.post(BASE_URL, json=chat_data)
    print_response("2. 聊天查询", response)
    if response.status_code == 200 and "data" in response.json():
        usage = response.json()["data"]["chat"]["usage"]
        print(f"📊 Token 用量: {usage['totalTokens']}")

    response = requests.post(BASE_URL, json={"query": "query { users { id } }"})
    print_response("3. 未知查询", response)

def main():
    """主测试函数"""
    print("🚀 开始测试中继服务")
    print(f"📍 服务地址: {BASE_URL}")

    try:
        response = requests.get(f"{BASE_URL}/health")
        print_response("健康检查", response)
    except requests.RequestException as e:
        print(f"❌ 无法连接到服务器: {e}")
        print("请确保服务器已启动: python main.py")
        return

    check_basics()
    check_simple_chat(sys.argv[1] if len(sys.argv) > 1 else "你好")
    check_graphql()

    print("\n✅ 所有测试完成!")

if __name__ == "__main__":
    main()
