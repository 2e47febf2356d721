"""Demo records loaded into the in-memory store at start-up."""

from __future__ import annotations

from typing import Any

SEED_USERS: list[dict[str, Any]] = [
    {
        "id": "1",
        "email": "manager@newwork.com",
        "role": "manager",
        "firstName": "Sarah",
        "lastName": "Johnson",
    },
    {
        "id": "2",
        "email": "employee@newwork.com",
        "role": "employee",
        "firstName": "Michael",
        "lastName": "Chen",
    },
    {
        "id": "3",
        "email": "coworker@newwork.com",
        "role": "coworker",
        "firstName": "Emily",
        "lastName": "Davis",
    },
]

SEED_PROFILES: list[dict[str, Any]] = [
    {
        "id": "1",
        "firstName": "Sarah",
        "lastName": "Johnson",
        "position": "Senior HR Manager",
        "department": "Human Resources",
        "profileImage": "https://images.unsplash.com/photo-1494790108755-2616b612b786?w=150&h=150&fit=crop&crop=face",
        "bio": "Experienced HR professional with 8+ years in talent management and employee development.",
        "skills": ["Talent Management", "Employee Relations", "HR Strategy", "Performance Management"],
        "email": "sarah.johnson@newwork.com",
        "phone": "+1-555-0123",
        "salary": 85000,
        "startDate": "2020-03-15",
        "employeeId": "EMP001",
        "address": "123 Business Ave, Tech City, TC 12345",
        "emergencyContact": {"name": "David Johnson", "phone": "+1-555-0124", "relationship": "Spouse"},
        "performanceRating": 4.6,
        "certifications": ["SHRM-SCP"],
        "workHistory": [{"company": "PeopleFirst Inc.", "position": "HR Generalist", "duration": "2015-2020"}],
    },
    {
        "id": "2",
        "firstName": "Michael",
        "lastName": "Chen",
        "position": "Software Engineer",
        "department": "Engineering",
        "profileImage": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop&crop=face",
        "bio": "Full-stack developer passionate about clean code and user experience.",
        "skills": ["React", "Node.js", "TypeScript", "Python", "AWS"],
        "email": "michael.chen@newwork.com",
        "phone": "+1-555-0125",
        "salary": 75000,
        "startDate": "2021-06-10",
        "employeeId": "EMP002",
        "address": "456 Tech Street, Innovation City, IC 67890",
        "emergencyContact": {"name": "Lisa Chen", "phone": "+1-555-0126", "relationship": "Sister"},
        "certifications": ["AWS Certified Developer"],
    },
    {
        "id": "3",
        "firstName": "Emily",
        "lastName": "Davis",
        "position": "Product Designer",
        "department": "Design",
        "profileImage": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=150&h=150&fit=crop&crop=face",
        "bio": "Creative designer focused on user-centered design and accessibility.",
        "skills": ["UI/UX Design", "Figma", "Prototyping", "User Research", "Accessibility"],
        "email": "emily.davis@newwork.com",
        "phone": "+1-555-0127",
        "salary": 70000,
        "startDate": "2022-01-20",
        "employeeId": "EMP003",
        "address": "789 Design Lane, Creative City, CC 11111",
        "emergencyContact": {"name": "Robert Davis", "phone": "+1-555-0128", "relationship": "Father"},
    },
]

SEED_FEEDBACK: list[dict[str, Any]] = [
    {
        "id": "1",
        "fromUserId": "3",
        "fromUserName": "Emily Davis",
        "toUserId": "2",
        "content": "Great team player and always willing to help with debugging issues.",
        "enhancedContent": (
            "Michael is an exceptional team player who consistently demonstrates a collaborative spirit "
            "and is always willing to assist with debugging complex technical issues."
        ),
        "isEnhanced": True,
        "createdAt": "2024-01-15T10:00:00Z",
        "updatedAt": "2024-01-15T10:00:00Z",
    },
    {
        "id": "2",
        "fromUserId": "2",
        "fromUserName": "Michael Chen",
        "toUserId": "3",
        "content": "Your designs are amazing! Love working with you.",
        "enhancedContent": (
            "Your design work is truly impressive. I enjoy collaborating with you and appreciate "
            "the user insight you bring to our projects."
        ),
        "isEnhanced": True,
        "createdAt": "2024-01-13T09:15:00Z",
        "updatedAt": "2024-01-13T09:15:00Z",
    },
    {
        "id": "3",
        "fromUserId": "1",
        "fromUserName": "Sarah Johnson",
        "toUserId": "3",
        "content": "You need to improve your communication with the team.",
        "enhancedContent": (
            "I've observed opportunities to strengthen your communication with the team. Sharing design "
            "progress earlier would help everyone stay aligned."
        ),
        "isEnhanced": True,
        "createdAt": "2024-01-12T16:30:00Z",
        "updatedAt": "2024-01-12T16:30:00Z",
    },
]

SEED_ABSENCE_REQUESTS: list[dict[str, Any]] = [
    {
        "id": "1",
        "employeeId": "2",
        "startDate": "2024-02-15",
        "endDate": "2024-02-16",
        "reason": "Personal day",
        "status": "approved",
        "createdAt": "2024-01-20T09:00:00Z",
        "updatedAt": "2024-01-21T14:30:00Z",
    },
]
