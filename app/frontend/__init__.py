"""前端页面逻辑：学生列表与学生表单"""
