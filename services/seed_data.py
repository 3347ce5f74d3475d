"""
Sample interview reviews, coding problems and MCQs loaded into every
SampleDataStore at startup.
"""

SAMPLE_REVIEWS = [
    {
        "id": 1,
        "company": "Cisco",
        "role": "Software Developer Intern",
        "experience": "Positive",
        "difficulty": "Hard",
        "rating": 4,
        "date": "2024-06-15",
        "interview_process": "3 Rounds: OA, Technical, HR",
        "questions_asked": ["Reverse Linked List", "SQL Joins", "OOPs concepts", "Data Structures"],
        "preparation_tips": "Focus on DSA and core CS concepts. Practice Leetcode medium problems.",
        "author": "Sample Data",
    },
    {
        "id": 2,
        "company": "Cisco",
        "role": "Full Stack Developer",
        "experience": "Positive",
        "difficulty": "Medium",
        "rating": 5,
        "date": "2024-05-20",
        "interview_process": "3 Rounds: Technical Screen, Panel, HR",
        "questions_asked": ["React concepts", "Node.js architecture", "REST API design", "System design basics"],
        "preparation_tips": "Prepare your portfolio projects. Be ready for in-depth technical discussions.",
        "author": "Sample Data",
    },
    {
        "id": 3,
        "company": "Infosys",
        "role": "Senior Software Engineer",
        "experience": "Neutral",
        "difficulty": "Medium",
        "rating": 3,
        "date": "2024-04-10",
        "interview_process": "2 Rounds: Technical, Managerial",
        "questions_asked": ["System design for a URL shortener", "Database design", "REST API best practices"],
        "preparation_tips": "Focus on system design and database concepts. Know your resume well.",
        "author": "Sample Data",
    },
    {
        "id": 4,
        "company": "Microsoft",
        "role": "Software Engineer",
        "experience": "Positive",
        "difficulty": "Hard",
        "rating": 5,
        "date": "2024-06-20",
        "interview_process": "4 Rounds: OA, Technical Phone Screen, Onsite (2x Technical, 1x Behavioral)",
        "questions_asked": [
            "Design a URL shortener",
            "Implement LRU Cache",
            "Find the median of two sorted arrays",
            "System design for a chat application",
        ],
        "preparation_tips": (
            "Focus on system design and algorithms. Be prepared for in-depth technical "
            "discussions. Practice coding on a whiteboard."
        ),
        "author": "Sample Data",
    },
    {
        "id": 5,
        "company": "Microsoft",
        "role": "Senior Software Engineer",
        "experience": "Positive",
        "difficulty": "Very Hard",
        "rating": 4,
        "date": "2024-05-15",
        "interview_process": "5 Rounds: Recruiter Call, Technical Phone Screen, Onsite (3x Technical, 1x Behavioral)",
        "questions_asked": [
            "Design a distributed key-value store",
            "Implement a thread-safe cache",
            "Lowest Common Ancestor in a Binary Tree",
            "Design Netflix",
        ],
        "preparation_tips": (
            "Strong system design skills are crucial. Be ready for in-depth discussions about "
            "distributed systems and concurrency. Practice system design interviews."
        ),
        "author": "Sample Data",
    },
    {
        "id": 6,
        "company": "Microsoft",
        "role": "Software Engineer II",
        "experience": "Neutral",
        "difficulty": "Hard",
        "rating": 4,
        "date": "2024-04-05",
        "interview_process": "4 Rounds: OA, Technical Phone Screen, Onsite (2x Technical, 1x Behavioral)",
        "questions_asked": [
            "Design a parking lot",
            "Serialize and Deserialize a Binary Tree",
            "Merge k Sorted Lists",
            "Design a rate limiter",
        ],
        "preparation_tips": (
            "Practice both coding and system design. Be prepared for behavioral questions using "
            "the STAR method. Know your resume inside out."
        ),
        "author": "Sample Data",
    },
]

SAMPLE_PROBLEMS = [
    {
        "id": 1,
        "title": "Two Sum",
        "description": (
            "Given an array of integers, return indices of the two numbers such that they "
            "add up to a specific target."
        ),
        "difficulty": "Easy",
        "category": "algorithms",
        "testCases": [
            {"input": {"nums": [2, 7, 11, 15], "target": 9}, "output": [0, 1]},
            {"input": {"nums": [3, 2, 4], "target": 6}, "output": [1, 2]},
            {"input": {"nums": [3, 3], "target": 6}, "output": [0, 1]},
        ],
        "solution": (
            "function twoSum(nums, target) {\n"
            "  const map = new Map();\n"
            "  for (let i = 0; i < nums.length; i++) {\n"
            "    const complement = target - nums[i];\n"
            "    if (map.has(complement)) {\n"
            "      return [map.get(complement), i];\n"
            "    }\n"
            "    map.set(nums[i], i);\n"
            "  }\n"
            "  return [];\n"
            "}"
        ),
    },
    {
        "id": 2,
        "title": "Reverse String",
        "description": (
            "Write a function that reverses a string. The input string is given as an "
            "array of characters."
        ),
        "difficulty": "Easy",
        "category": "algorithms",
        "testCases": [
            {"input": {"s": ["h", "e", "l", "l", "o"]}, "output": ["o", "l", "l", "e", "h"]},
            {"input": {"s": ["H", "a", "n", "n", "a", "h"]}, "output": ["h", "a", "n", "n", "a", "H"]},
        ],
        "solution": (
            "function reverseString(s) {\n"
            "  let left = 0;\n"
            "  let right = s.length - 1;\n"
            "  while (left < right) {\n"
            "    [s[left], s[right]] = [s[right], s[left]];\n"
            "    left++;\n"
            "    right--;\n"
            "  }\n"
            "  return s;\n"
            "}"
        ),
    },
    {
        "id": 3,
        "title": "Valid Parentheses",
        "description": (
            'Given a string s containing just the characters "(", ")", "{", "}", "[" and "]", '
            "determine if the input string is valid."
        ),
        "difficulty": "Medium",
        "category": "data structures",
        "testCases": [
            {"input": {"s": "()"}, "output": True},
            {"input": {"s": "()[]{}"}, "output": True},
            {"input": {"s": "(]"}, "output": False},
            {"input": {"s": "([)]"}, "output": False},
            {"input": {"s": "{[]}"}, "output": True},
        ],
        "solution": (
            "function isValid(s) {\n"
            "  const stack = [];\n"
            '  const map = { ")": "(", "}": "{", "]": "[" };\n'
            "  for (const char of s) {\n"
            "    if (!(char in map)) {\n"
            "      stack.push(char);\n"
            "    } else if (stack.pop() !== map[char]) {\n"
            "      return false;\n"
            "    }\n"
            "  }\n"
            "  return stack.length === 0;\n"
            "}"
        ),
    },
]

SAMPLE_MCQS = [
    {
        "id": 1,
        "question": "What is the time complexity of binary search?",
        "options": ["O(n)", "O(log n)", "O(n log n)", "O(1)"],
        "correct": 1,
        "category": "algorithms",
        "difficulty": "Easy",
        "company": "Google",
        "role": "Software Engineer",
        "explanation": "Binary search works by repeatedly dividing the search interval in half.",
    },
    {
        "id": 2,
        "question": "Which data structure uses LIFO (Last In First Out) principle?",
        "options": ["Queue", "Stack", "Array", "Linked List"],
        "correct": 1,
        "category": "data structures",
        "difficulty": "Easy",
        "company": "Microsoft",
        "role": "Frontend Developer",
        "explanation": "Stack follows LIFO principle where the last element added is the first one to be removed.",
    },
    {
        "id": 3,
        "question": "What is the space complexity of merge sort?",
        "options": ["O(1)", "O(log n)", "O(n)", "O(n log n)"],
        "correct": 2,
        "category": "algorithms",
        "difficulty": "Medium",
        "company": "Microsoft",
        "explanation": "Merge sort requires O(n) extra space for the temporary arrays used during merging.",
    },
    {
        "id": 4,
        "question": "What is the time complexity of accessing an element in an array by index?",
        "options": ["O(1)", "O(n)", "O(log n)", "O(n²)"],
        "correct": 0,
        "category": "algorithms",
        "difficulty": "Easy",
        "company": "Amazon",
        "role": "Backend Developer",
        "explanation": "Array elements are stored in contiguous memory locations, allowing O(1) access time.",
    },
    {
        "id": 5,
        "question": "Which sorting algorithm has the worst-case time complexity of O(n²)?",
        "options": ["Merge Sort", "Quick Sort", "Bubble Sort", "Heap Sort"],
        "correct": 2,
        "category": "algorithms",
        "difficulty": "Medium",
        "company": "Facebook",
        "role": "Full Stack Developer",
        "explanation": "Bubble Sort has O(n²) time complexity in both average and worst case.",
    },
    {
        "id": 6,
        "question": "What is the main advantage of using a hash table?",
        "options": [
            "Maintains order of elements",
            "O(1) average time complexity for search/insert/delete",
            "Efficient for range queries",
            "No collision handling needed",
        ],
        "correct": 1,
        "category": "data structures",
        "difficulty": "Medium",
        "company": "Google",
        "role": "Software Engineer",
        "explanation": "Hash tables provide average O(1) time complexity for basic operations.",
    },
]
