"""Lock-guarded linked list and deque, safe to share between threads."""