"""
Seed data loaded into the entity store at first use
Wire (camelCase) field names, validated into records on load
"""

DEMO_USERS = [
    {
        "id": "1",
        "name": "Sarah Chen",
        "email": "sarah@company.com",
        "avatar": "👩‍💻",
        "role": "Senior Developer",
        "departmentId": "1",
        "tasksAssigned": 1,
        "tasksCompleted": 45,
        "skills": ["React", "GraphQL", "Node.js"],
        "isActive": True,
        "createdAt": "2024-01-15",
        "lastLogin": "2025-11-27",
    },
    {
        "id": "2",
        "name": "Mike Johnson",
        "email": "mike@company.com",
        "avatar": "👨‍💼",
        "role": "Tech Lead",
        "departmentId": "1",
        "tasksAssigned": 1,
        "tasksCompleted": 67,
        "skills": ["Node.js", "AWS", "Docker"],
        "isActive": True,
        "createdAt": "2023-11-10",
        "lastLogin": "2025-11-27",
    },
    {
        "id": "3",
        "name": "Emma Davis",
        "email": "emma@company.com",
        "avatar": "👩‍🔬",
        "role": "QA Engineer",
        "departmentId": "2",
        "tasksAssigned": 0,
        "tasksCompleted": 89,
        "skills": ["Jest", "Cypress", "Testing"],
        "isActive": True,
        "createdAt": "2024-03-20",
        "lastLogin": "2025-11-26",
    },
    {
        "id": "4",
        "name": "Alex Wong",
        "email": "alex@company.com",
        "avatar": "🔒",
        "role": "Security Specialist",
        "departmentId": "1",
        "tasksAssigned": 0,
        "tasksCompleted": 34,
        "skills": ["Security", "Compliance"],
        "isActive": True,
        "createdAt": "2024-06-01",
        "lastLogin": "2025-11-27",
    },
]

DEMO_DEPARTMENTS = [
    {"id": "1", "name": "Engineering", "description": "Product development", "managerId": "2", "budget": 500000},
    {"id": "2", "name": "Quality Assurance", "description": "Testing and QA", "managerId": "3", "budget": 200000},
]

DEMO_PROJECTS = [
    {
        "id": "1",
        "name": "E-Commerce Platform",
        "description": "Complete platform redesign",
        "status": "ACTIVE",
        "priority": "HIGHEST",
        "startDate": "2025-10-01",
        "endDate": "2026-03-31",
        "budget": 150000,
        "actualCost": 45000,
        "progress": 35,
        "ownerId": "2",
        "departmentId": "1",
        "teamIds": ["1", "2", "3"],
        "tags": ["frontend", "backend"],
    },
    {
        "id": "2",
        "name": "Mobile App",
        "description": "iOS and Android apps",
        "status": "PLANNING",
        "priority": "HIGH",
        "startDate": "2026-01-01",
        "endDate": "2026-08-31",
        "budget": 200000,
        "actualCost": 0,
        "progress": 10,
        "ownerId": "1",
        "departmentId": "1",
        "teamIds": ["1", "2"],
        "tags": ["mobile"],
    },
]

DEMO_TASKS = [
    {
        "id": "1",
        "title": "Design new landing page",
        "description": "Create modern, responsive landing page",
        "status": "IN_PROGRESS",
        "priority": "HIGH",
        "assigneeId": "1",
        "reporterId": "2",
        "projectId": "1",
        "dueDate": "2025-12-05",
        "estimatedHours": 16,
        "actualHours": 8,
        "createdAt": "2025-11-20T09:00:00",
        "updatedAt": "2025-11-27T09:00:00",
        "tags": ["design", "frontend"],
        "watcherIds": ["2", "3"],
    },
    {
        "id": "2",
        "title": "Implement GraphQL API",
        "description": "Set up Apollo Server with schema",
        "status": "COMPLETED",
        "priority": "HIGHEST",
        "assigneeId": "2",
        "reporterId": "2",
        "projectId": "1",
        "dueDate": "2025-11-28",
        "estimatedHours": 20,
        "actualHours": 18,
        "createdAt": "2025-11-15T09:00:00",
        "updatedAt": "2025-11-26T17:00:00",
        "completedAt": "2025-11-26T17:00:00",
        "tags": ["backend", "api"],
        "watcherIds": ["1"],
    },
]

DEMO_COMMENTS = [
    {"id": "1", "content": "Looking good!", "authorId": "2", "taskId": "1", "createdAt": "2025-11-21T10:30:00", "isEdited": False},
    {"id": "2", "content": "Great work!", "authorId": "1", "taskId": "2", "createdAt": "2025-11-26T18:00:00", "isEdited": False},
]

DEMO_TIME_ENTRIES = [
    {"id": "1", "userId": "1", "taskId": "1", "hours": 4, "description": "Initial design", "date": "2025-11-25", "billable": True},
    {"id": "2", "userId": "1", "taskId": "1", "hours": 4, "description": "Responsive layout", "date": "2025-11-26", "billable": True},
]

SEED_DATA = {
    "users": DEMO_USERS,
    "departments": DEMO_DEPARTMENTS,
    "projects": DEMO_PROJECTS,
    "tasks": DEMO_TASKS,
    "comments": DEMO_COMMENTS,
    "time_entries": DEMO_TIME_ENTRIES,
}
