"""Built-in message tables. Templates take positional ``{0}``-style arguments."""

LOCALES: dict[str, dict[str, str]] = {
    "zh": {
        "baike.usage": "用法：baike <关键词>，例如：baike 百度",
        "baike.article-not-exist": "百度百科尚未收录词条“{0}”。",
        "baike.has-multi-result": "“{0}”有多个搜索结果（显示前 {1} 个）：",
        "baike.await-choose-result": "请发送 1 到 {0} 之间的编号选择词条。",
        "baike.incorrect-index": "您输入的编号不正确。",
        "baike.error-with-link": "获取词条时出现问题，请尝试直接访问：{0}",
    },
    "en": {
        "baike.usage": "Usage: baike <keyword>, e.g. baike Baidu",
        "baike.article-not-exist": "Baidu Baike has no article for \"{0}\".",
        "baike.has-multi-result": "\"{0}\" has multiple results (showing the first {1}):",
        "baike.await-choose-result": "Reply with a number from 1 to {0} to choose an entry.",
        "baike.incorrect-index": "That number is not a valid choice.",
        "baike.error-with-link": "Could not fetch the entry, try visiting: {0}",
    },
}
