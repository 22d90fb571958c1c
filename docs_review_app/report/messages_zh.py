# All UI strings for Chinese locale
MESSAGES = {
    # Terminology issues
    "issue.should_keep_english": '术语 "{term}" 应保持英文，但发现 {count} 处使用了中文 "{chinese}"',
    "issue.should_translate": '术语 "{term}" 应翻译为 "{chinese}"，发现 {count} 处未翻译',
    "issue.alternative_used": '发现使用了替代词 "{term}"，建议使用标准术语 "{preferred}"',
    "issue.duplicate_chinese": '中文术语 "{chinese}" 对应多个英文术语: {english}, {other}',
    "issue.missing_context": '术语 "{term}" 缺少上下文说明',
    "issue_type.should_keep_english": "应保持英文",
    "issue_type.should_translate": "应翻译为中文",
    "issue_type.alternative_used": "使用了替代词",
    "issue_type.duplicate_chinese": "重复的中文翻译",
    "issue_type.missing_context": "缺少上下文",
    # Terminology console report
    "check.title": "术语一致性检查报告",
    "check.all_passed": "所有文件的术语使用都符合规范！",
    "check.found": "发现 {total} 个术语问题：",
    "check.type_stats": "问题类型统计:",
    "check.type_count": "{desc}: {count} 个",
    "check.read_errors": "无法读取 {count} 个文件:",
    "fix.preview": "预览模式: 将修复 {changes} 个问题",
    "fix.hint": "使用 --apply 参数执行实际修复",
    "fix.applied": "已修复 {path} 中的 {changes} 个术语问题",
    "validate.passed": "术语一致性检查通过",
    "validate.failed": "发现 {count} 个问题:",
    # Glossary
    "glossary.title": "术语表",
    "glossary.translation": "中文翻译",
    "glossary.context": "说明",
    "glossary.alternatives": "替代词",
    "glossary.usage": "使用建议",
    "glossary.keep_english": "保持英文",
    "category.technical": "技术术语",
    "category.concept": "概念术语",
    "category.tool": "工具名称",
    # Quality report
    "quality.title": "文档质量检查报告",
    "quality.generated_at": "生成时间",
    "quality.overall": "总体评分",
    "quality.passed": "通过",
    "quality.failed": "未通过",
    "quality.terminology": "术语一致性检查",
    "quality.terminology_ok": "所有术语使用符合规范",
    "quality.terminology_issues": "发现 {count} 个问题",
    "quality.links": "链接有效性检查",
    "quality.links_ok": "检查了 {total} 个链接，全部有效",
    "quality.links_broken": "{broken}/{total} 个链接无效",
    "quality.link_internal": "内部链接无效",
    "quality.link_external": "外部链接无效",
    "quality.code": "代码示例检查",
    "quality.code_ok": "检查了 {total} 个代码块，全部有效",
    "quality.code_issues": "{valid}/{total} 个代码块有效",
    "quality.code_block": "代码块问题",
    "quality.verdict_excellent": "文档质量优秀！",
    "quality.verdict_good": "文档质量良好，还有改进空间",
    "quality.verdict_poor": "文档质量需要改进",
    "code.empty": "代码块为空",
    "code.unbalanced": "括号不匹配",
    "code.bad_json": "JSON 格式错误",
    "code.bad_yaml": "YAML 格式错误",
    "code.dangerous": "包含危险命令",
    # Navigation labels
    "nav.factor_title": "因子{num}: {title}",
    "nav.label.getting-started": "快速开始",
    "nav.label.concepts": "核心概念",
    "nav.label.factors": "12个因子",
    "nav.label.tutorials": "实践教程",
    "nav.label.tools": "工具指南",
    "nav.label.best-practices": "最佳实践",
    "nav.label.community": "社区资源",
    "nav.label.workshop": "Workshop教程",
    "nav.label.examples": "代码示例",
    "nav.label.advanced": "高级教程",
    "nav.label.introduction": "项目介绍",
    "nav.label.installation": "环境配置",
    "nav.label.first-agent": "第一个智能体",
    "nav.label.overview": "概述",
    "nav.label.terminology": "术语表",
    "nav.label.agent-architecture": "智能体架构",
}
