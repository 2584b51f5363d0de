"""String searching, transforms and palindrome finding."""